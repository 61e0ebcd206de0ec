"""
Core Infrastructure - Logging, Errors, Configuration

This package provides centralized infrastructure utilities that should be used
throughout the renderer instead of direct library calls.

Usage:
    from dashforge.core import get_config, get_logger, WidgetNotFoundError

    config = get_config()
    logger = get_logger(__name__)
"""

from ..config import ConfigurationError, RendererConfig, get_config
from .errors import (
    DashboardRenderError,
    DashboardStateError,
    DirectiveContextError,
    DirectiveError,
    ParameterTypeError,
    ParameterValueError,
    RenderOutputError,
    WidgetNotFoundError,
)
from .logging_config import get_logger, log_with_context, setup_logging

__all__ = [
    # Configuration
    "get_config",
    "ConfigurationError",
    "RendererConfig",
    # Logging
    "get_logger",
    "log_with_context",
    "setup_logging",
    # Errors
    "DashboardRenderError",
    "DashboardStateError",
    "DirectiveContextError",
    "DirectiveError",
    "ParameterTypeError",
    "ParameterValueError",
    "RenderOutputError",
    "WidgetNotFoundError",
]
