"""
Dashboard Framework

Provides the shared CSS and JavaScript that the ``import`` and ``theme``
directives write into a rendered dashboard.

Package Structure:
    - theme.py: Theme variables, named dashboard themes, theme style
    - base_styles.py: CSS reset and chart element layout
    - javascript.py: dashboardFactory / chartFactory runtime

Usage::

    from dashforge.framework import get_import_markup, get_theme_markup

    markup = get_import_markup(context_path="/analytics")
    style = get_theme_markup("dark", ignore_border_width=True)
"""

from ..security import HTMLSanitizer
from .base_styles import get_base_styles
from .javascript import CHART_FACTORY, DASHBOARD_FACTORY, get_dashboard_javascript
from .theme import DashboardTheme, get_dashboard_theme_style, get_theme, get_theme_variables


def get_dashboard_framework(
    header_gradient_start="#667eea",
    header_gradient_end="#764ba2",
    include_theme_toggle=True,
):
    """
    Returns the CSS + JavaScript bundle for a dashboard page.

    Args:
        header_gradient_start: Start color for header gradient (default: #667eea)
        header_gradient_end: End color for header gradient (default: #764ba2)
        include_theme_toggle: Include the light/dark toggle (default: True)

    Returns:
        Tuple of (css_string, javascript_string) ready to inject into HTML
    """
    css = f"""
    <style type="text/css">
    {get_theme_variables(header_gradient_start, header_gradient_end)}
    {get_base_styles()}
    </style>
    """

    javascript = get_dashboard_javascript(include_theme_toggle=include_theme_toggle)

    return css, javascript


def get_import_markup(context_path: str = "") -> str:
    """
    Returns the markup written by the ``import`` directive.

    Args:
        context_path: Web context path, exposed to scripts as ``dashboardContextPath``

    Returns:
        Framework CSS and runtime JavaScript
    """
    css, javascript = get_dashboard_framework()
    context_script = (
        '<script type="text/javascript">\n'
        f"var dashboardContextPath = {_js_string(context_path)};\n"
        "</script>\n"
    )
    return css + javascript + context_script


def get_theme_markup(theme_name: str | None = None, ignore_border_width: bool = True) -> str:
    """
    Returns the markup written by the ``theme`` directive.

    Args:
        theme_name: Named theme (default light)
        ignore_border_width: Leave the dashboard border width out of the style

    Returns:
        A <style> block for the selected theme
    """
    theme = get_theme(theme_name)
    style = get_dashboard_theme_style(theme, ignore_border_width=ignore_border_width)
    return f'<style type="text/css" data-theme-name="{theme.name}">{style}</style>\n'


def _js_string(value: str) -> str:
    return f'"{HTMLSanitizer.escape_javascript_string(value)}"'


__all__ = [
    "CHART_FACTORY",
    "DASHBOARD_FACTORY",
    "DashboardTheme",
    "get_base_styles",
    "get_dashboard_framework",
    "get_dashboard_javascript",
    "get_dashboard_theme_style",
    "get_import_markup",
    "get_theme",
    "get_theme_markup",
    "get_theme_variables",
]
