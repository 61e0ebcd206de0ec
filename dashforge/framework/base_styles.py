"""
Base Styles

Provides the CSS reset and the layout rules for dashboard bodies and chart
elements. Forms the foundation the theme style builds on.
"""


def get_base_styles():
    """
    Returns base styles for dashboard pages.

    Includes:
    - CSS reset (box-sizing, margin, padding)
    - Body and font styles
    - Chart element sizing (mobile → desktop)

    Returns:
        String of base CSS styles
    """
    return """
    /* CSS Reset */
    * {
        margin: 0;
        padding: 0;
        box-sizing: border-box;
    }

    /* Body and Font Styles */
    body {
        font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', system-ui, sans-serif;
        background: var(--bg-primary);
        color: var(--text-primary);
        line-height: 1.6;
    }

    /* Chart Elements */
    .dg-chart {
        position: relative;
        width: 100%;
        min-height: 240px;
        padding: var(--spacing-sm);
        border: 1px solid var(--border-color);
        border-radius: 8px;
    }

    @media (min-width: 768px) {
        .dg-chart { min-height: 320px; }
    }
    """
