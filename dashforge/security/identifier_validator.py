"""
Identifier Validator for Generated Script

Directive parameters such as ``var`` and ``listener`` are written verbatim
into inline JavaScript, and ``elementId`` into an HTML id attribute. Values
are checked against strict whitelists so a template cannot inject script
through a parameter.
"""

import re

from .validation import ValidationError


class IdentifierValidator:
    """
    Validates JavaScript identifiers, dotted references and HTML element ids.
    """

    # ASCII identifier: letter, $ or _ followed by letters, digits, $ or _
    JS_IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

    # HTML5 ids only forbid whitespace; restrict further to characters safe in CSS selectors
    ELEMENT_ID_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9_\-:.]*$")

    MAX_LENGTH = 128

    RESERVED_WORDS = {
        "break",
        "case",
        "catch",
        "class",
        "const",
        "continue",
        "debugger",
        "default",
        "delete",
        "do",
        "else",
        "export",
        "extends",
        "false",
        "finally",
        "for",
        "function",
        "if",
        "import",
        "in",
        "instanceof",
        "let",
        "new",
        "null",
        "return",
        "super",
        "switch",
        "this",
        "throw",
        "true",
        "try",
        "typeof",
        "var",
        "void",
        "while",
        "with",
        "yield",
    }

    @staticmethod
    def validate_js_identifier(name: str) -> str:
        """
        Validate a JavaScript variable name.

        Args:
            name: Candidate identifier

        Returns:
            The identifier, unchanged

        Raises:
            ValidationError: If name is not a plain, non-reserved identifier

        Example:
            >>> IdentifierValidator.validate_js_identifier("salesDashboard")
            'salesDashboard'
            >>> IdentifierValidator.validate_js_identifier("x; alert(1)")
            ValidationError: Invalid JavaScript identifier
        """
        if not name:
            raise ValidationError("JavaScript identifier cannot be empty")

        if len(name) > IdentifierValidator.MAX_LENGTH:
            raise ValidationError(
                f"JavaScript identifier too long: {len(name)} chars (max {IdentifierValidator.MAX_LENGTH})"
            )

        if not IdentifierValidator.JS_IDENTIFIER_PATTERN.match(name):
            raise ValidationError(f"Invalid JavaScript identifier: '{name}'")

        if name in IdentifierValidator.RESERVED_WORDS:
            raise ValidationError(f"JavaScript reserved word cannot be used as identifier: '{name}'")

        return name

    @staticmethod
    def validate_js_reference(reference: str) -> str:
        """
        Validate a dotted JavaScript reference such as ``app.listeners.sales``.

        Args:
            reference: Candidate reference

        Returns:
            The reference, unchanged

        Raises:
            ValidationError: If any segment is not a valid identifier
        """
        if not reference:
            raise ValidationError("JavaScript reference cannot be empty")

        for segment in reference.split("."):
            try:
                IdentifierValidator.validate_js_identifier(segment)
            except ValidationError:
                raise ValidationError(f"Invalid JavaScript reference: '{reference}'")

        return reference

    @staticmethod
    def validate_element_id(element_id: str) -> str:
        """
        Validate an HTML element id.

        Args:
            element_id: Candidate id

        Returns:
            The id, unchanged

        Raises:
            ValidationError: If the id is empty, too long or contains unsafe characters
        """
        if not element_id:
            raise ValidationError("Element id cannot be empty")

        if len(element_id) > IdentifierValidator.MAX_LENGTH:
            raise ValidationError(
                f"Element id too long: {len(element_id)} chars (max {IdentifierValidator.MAX_LENGTH})"
            )

        if not IdentifierValidator.ELEMENT_ID_PATTERN.match(element_id):
            raise ValidationError(f"Invalid element id: '{element_id}'")

        return element_id
