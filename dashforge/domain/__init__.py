"""
Domain Models - Render state and dashboard structures

This package contains the state a render pass builds and shares:
    - identifiers: Sequence allocation and generated names
    - render_context: RenderContext attribute store and attribute keys
    - dashboard: Dashboard accumulator, Chart, TemplateDashboardWidget
    - widgets: ChartWidget / WidgetSource interfaces

Usage:
    from dashforge.domain import Dashboard, RenderContext, TemplateDashboardWidget

    context = RenderContext()
    dashboard = Dashboard(widget=TemplateDashboardWidget(id="sales"), render_context=context)
"""

from .dashboard import Chart, Dashboard, TemplateDashboardWidget
from .render_context import RenderContext, WebContext
from .widgets import ChartWidget, InMemoryWidgetSource, WidgetSource

__all__ = [
    "Chart",
    "ChartWidget",
    "Dashboard",
    "InMemoryWidgetSource",
    "RenderContext",
    "TemplateDashboardWidget",
    "WebContext",
    "WidgetSource",
]
