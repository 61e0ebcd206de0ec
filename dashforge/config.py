"""
Renderer Configuration

Provides centralized, validated configuration for the template renderer.
Values come from keyword arguments or from environment variables (a local
.env file is loaded first), and are validated with fail-fast behavior.

Usage:
    from dashforge.config import get_config

    config = get_config()
    print(config.template_root)
    print(config.default_template_encoding)

Environment Variables:
    DASHFORGE_TEMPLATE_ROOT          Directory holding <widget_id>/<template> files
    DASHFORGE_TEMPLATE_ENCODING      Default template encoding (default: UTF-8)
    DASHFORGE_IGNORE_BORDER_WIDTH    Ignore the dashboard border width in theme CSS (default: true)
    DASHFORGE_CONTEXT_PATH           Web context path prefixed to resource URLs (default: "")

Raises:
    ConfigurationError: If configuration is invalid
"""

import codecs
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_TEMPLATE_ENCODING = "UTF-8"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class ConfigurationError(Exception):
    """Raised when configuration is missing or invalid."""

    pass


@dataclass(frozen=True)
class RendererConfig:
    """
    Validated renderer configuration.

    Attributes:
        template_root: Root directory of dashboard templates (None for string-only rendering)
        default_template_encoding: Encoding used to read template files
        ignore_dashboard_style_border_width: Drop the border width from the dashboard theme style
        context_path: Web application context path (e.g. "/analytics")
    """

    template_root: Path | None = None
    default_template_encoding: str = DEFAULT_TEMPLATE_ENCODING
    ignore_dashboard_style_border_width: bool = True
    context_path: str = ""

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self):
        """
        Validate renderer configuration.

        Raises:
            ConfigurationError: If configuration is invalid
        """
        if not self.default_template_encoding:
            raise ConfigurationError("DASHFORGE_TEMPLATE_ENCODING cannot be empty")

        try:
            codecs.lookup(self.default_template_encoding)
        except LookupError:
            raise ConfigurationError(
                f"DASHFORGE_TEMPLATE_ENCODING is not a known encoding: {self.default_template_encoding}"
            )

        if self.context_path and not self.context_path.startswith("/"):
            raise ConfigurationError(f"DASHFORGE_CONTEXT_PATH must start with '/': {self.context_path}")

        if self.context_path.endswith("/") and self.context_path != "/":
            raise ConfigurationError(f"DASHFORGE_CONTEXT_PATH must not end with '/': {self.context_path}")

        if self.template_root is not None and not Path(self.template_root).is_dir():
            raise ConfigurationError(f"DASHFORGE_TEMPLATE_ROOT is not a directory: {self.template_root}")


def _parse_bool(name: str, value: str | None, default: bool) -> bool:
    if value is None or value.strip() == "":
        return default

    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False

    raise ConfigurationError(f"{name} must be a boolean (true/false): {value}")


def get_config(**overrides) -> RendererConfig:
    """
    Build a validated RendererConfig from the environment.

    Keyword overrides take precedence over environment variables.

    Args:
        **overrides: Any RendererConfig field

    Returns:
        RendererConfig: Validated configuration

    Raises:
        ConfigurationError: If configuration is invalid

    Example:
        config = get_config(template_root=Path("dashboards"))
    """
    load_dotenv()

    root = os.getenv("DASHFORGE_TEMPLATE_ROOT")
    values = {
        "template_root": Path(root) if root else None,
        "default_template_encoding": os.getenv("DASHFORGE_TEMPLATE_ENCODING") or DEFAULT_TEMPLATE_ENCODING,
        "ignore_dashboard_style_border_width": _parse_bool(
            "DASHFORGE_IGNORE_BORDER_WIDTH", os.getenv("DASHFORGE_IGNORE_BORDER_WIDTH"), True
        ),
        "context_path": os.getenv("DASHFORGE_CONTEXT_PATH", ""),
    }
    values.update(overrides)

    return RendererConfig(**values)
