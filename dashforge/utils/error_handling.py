"""
Error Handling Utility Module

Structured logging for failures that must still propagate. A failed render
pass is logged once, with the widget and template that failed, and the
original exception is re-raised unchanged for the caller to handle.
"""

import logging
from typing import Any, NoReturn


def log_and_raise(
    logger: logging.Logger,
    error: Exception,
    context: dict[str, Any],
    error_type: str = "Operation",
) -> NoReturn:
    """
    Log an error with context and re-raise it.

    Use this for errors that should halt execution and bubble up.

    Args:
        logger: Logger instance
        error: The caught exception
        context: Structured data about what failed
        error_type: Human-readable description

    Raises:
        The original exception after logging

    Example:
        try:
            render_template(widget)
        except Exception as e:
            log_and_raise(
                logger, e,
                context={"widget_id": widget.id},
                error_type="Dashboard render"
            )
    """
    logger.error(
        f"{error_type} failed: {error}",
        exc_info=True,
        extra={
            "error_type": error_type,
            "exception_class": error.__class__.__name__,
            "context": context,
        },
    )
    raise error
