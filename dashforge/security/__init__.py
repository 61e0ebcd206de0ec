"""
Security Utilities for Input Validation and Sanitization

This package provides centralized validation for everything a template can
push into generated markup or file lookups.

Package Structure:
    - validation: Base ValidationError exception
    - identifier_validator: JavaScript identifier and HTML id validation
    - html_sanitizer: HTML/JS escaping for XSS prevention
    - path_validator: Template path validation for traversal prevention

Usage:
    from dashforge.security import IdentifierValidator, ValidationError

    try:
        var_name = IdentifierValidator.validate_js_identifier(user_input)
    except ValidationError as e:
        logger.error(f"Invalid input: {e}")
        raise
"""

from .html_sanitizer import HTMLSanitizer
from .identifier_validator import IdentifierValidator
from .path_validator import PathValidator
from .validation import ValidationError

__all__ = [
    "ValidationError",
    "IdentifierValidator",
    "HTMLSanitizer",
    "PathValidator",
]
