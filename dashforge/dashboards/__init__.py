"""
Dashboard Rendering - Template directives and rendering

This package contains:
    - directives: import/theme/dashboard/chart handlers and the dispatcher
    - render_pass: Per-render state handed to directives
    - emitter: Script/markup writing helpers
    - renderer: Jinja2 template renderer
    - resources: Template file lookup
    - chart_widgets: Default script-emitting chart widget

Usage:
    from dashforge.dashboards import TemplateDashboardRenderer

    renderer = TemplateDashboardRenderer(widget_source)
    html = renderer.render(dashboard_widget).html
"""

from .chart_widgets import ScriptChartWidget
from .directives import DirectiveDispatcher
from .render_pass import RenderPass
from .renderer import RenderResult, TemplateDashboardRenderer
from .resources import DashboardWidgetResManager

__all__ = [
    "DashboardWidgetResManager",
    "DirectiveDispatcher",
    "RenderPass",
    "RenderResult",
    "ScriptChartWidget",
    "TemplateDashboardRenderer",
]
