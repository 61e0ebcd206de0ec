"""
Base Validation Exception for Security Utilities

This module provides the base exception class used across all validators.
"""


class ValidationError(Exception):
    """
    Raised when input validation fails.

    Directive handlers translate this into a ParameterValueError so the
    template author sees which directive and parameter were rejected.
    """

    pass
