"""
Dashboard Themes

Provides CSS custom properties for light/dark themes and the dashboard
theme style emitted by the ``theme`` directive.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class DashboardTheme:
    """
    Colors and border of a rendered dashboard.

    Attributes:
        name: Theme name ("light", "dark")
        color: Foreground text color
        background: Dashboard background color
        border_color: Dashboard border color
        border_width: Dashboard border width (CSS length)
        chart_palette: Series colors handed to chart widgets
    """

    name: str
    color: str
    background: str
    border_color: str
    border_width: str
    chart_palette: tuple[str, ...]


LIGHT_THEME = DashboardTheme(
    name="light",
    color="#1f2937",
    background="#ffffff",
    border_color="#e5e7eb",
    border_width="1px",
    chart_palette=("#667eea", "#10b981", "#f59e0b", "#ef4444", "#764ba2"),
)

DARK_THEME = DashboardTheme(
    name="dark",
    color="#f1f5f9",
    background="#1e293b",
    border_color="#475569",
    border_width="1px",
    chart_palette=("#8b5cf6", "#34d399", "#fbbf24", "#f87171", "#60a5fa"),
)

THEMES = {theme.name: theme for theme in (LIGHT_THEME, DARK_THEME)}


def get_theme(name: str | None = None) -> DashboardTheme:
    """
    Look up a theme by name, defaulting to light.

    Args:
        name: Theme name (case-insensitive); None or unknown falls back to light

    Returns:
        DashboardTheme
    """
    if not name:
        return LIGHT_THEME

    return THEMES.get(name.lower(), LIGHT_THEME)


def get_theme_variables(primary_color="#667eea", secondary_color="#764ba2"):
    """
    Returns CSS custom properties for light/dark themes.

    Args:
        primary_color: Primary brand color (used for header gradient start)
        secondary_color: Secondary brand color (used for header gradient end)

    Returns:
        String of CSS custom properties with :root and [data-theme="dark"] selectors
    """
    return f"""
    :root {{
        /* Background Colors */
        --bg-primary: #f9fafb;
        --bg-secondary: {LIGHT_THEME.background};

        /* Text Colors */
        --text-primary: {LIGHT_THEME.color};
        --text-secondary: #6b7280;

        /* Border and Shadow */
        --border-color: {LIGHT_THEME.border_color};
        --shadow: rgba(0,0,0,0.1);

        /* Brand Colors */
        --header-gradient-start: {primary_color};
        --header-gradient-end: {secondary_color};

        /* Spacing Scale */
        --spacing-xs: 8px;
        --spacing-sm: 12px;
        --spacing-md: 16px;
        --spacing-lg: 24px;
    }}

    [data-theme="dark"] {{
        /* Dark Mode Background Colors */
        --bg-primary: #0f172a;
        --bg-secondary: {DARK_THEME.background};

        /* Dark Mode Text Colors */
        --text-primary: {DARK_THEME.color};
        --text-secondary: #cbd5e1;

        /* Dark Mode Border and Shadow */
        --border-color: {DARK_THEME.border_color};
        --shadow: rgba(0,0,0,0.3);
    }}
    """


def get_dashboard_theme_style(theme: DashboardTheme, ignore_border_width: bool = True) -> str:
    """
    Returns the CSS applied to the dashboard body and its chart elements.

    Args:
        theme: Selected dashboard theme
        ignore_border_width: Leave the border width out of the dashboard rule
            (the page's own layout owns the border)

    Returns:
        String of CSS rules (no <style> tag)
    """
    border_rules = [f"border-color: {theme.border_color};"]
    if not ignore_border_width:
        border_rules.append(f"border-width: {theme.border_width};")
        border_rules.append("border-style: solid;")

    border_css = "\n        ".join(border_rules)

    return f"""
    body.dg-dashboard {{
        color: {theme.color};
        background-color: {theme.background};
        {border_css}
    }}

    .dg-chart {{
        color: {theme.color};
        background-color: {theme.background};
        border-color: {theme.border_color};
    }}
    """
