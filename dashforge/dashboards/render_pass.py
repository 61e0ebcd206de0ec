"""
Render pass state

A RenderPass bundles everything one template execution owns: the render
context, the dashboard accumulators and the collaborators the directives
need (widget source, page hooks). It is created fresh for every render and
handed to the template under RENDER_PASS_KEY, which is how directive
handlers reach it without holding any state of their own.
"""

from dataclasses import dataclass, field
from typing import Protocol

from ..core.errors import WidgetNotFoundError
from ..domain.dashboard import Chart, Dashboard
from ..domain.render_context import ATTR_CHART_DASHBOARD, RenderContext
from ..domain.widgets import ChartWidget, WidgetSource

RENDER_PASS_KEY = "__dashforge_render_pass__"


class PageHooks(Protocol):
    """Markup the owning page provides for the import and theme directives."""

    def import_markup(self, render_pass: "RenderPass") -> str: ...

    def theme_markup(self, render_pass: "RenderPass") -> str: ...


@dataclass
class RenderPass:
    """
    State of one render pass.

    Attributes:
        dashboard: Primary dashboard accumulator, created before processing starts
        widget_source: Resolves chart widget ids
        hooks: Import/theme markup provider
        theme_name: Theme selected for this page (None for default)
        dashboards: Every dashboard opened in this pass, in encounter order
    """

    dashboard: Dashboard
    widget_source: WidgetSource
    hooks: PageHooks
    theme_name: str | None = None
    dashboards: list[Dashboard] = field(default_factory=list)

    @property
    def render_context(self) -> RenderContext:
        return self.dashboard.render_context

    def open_dashboard(self) -> Dashboard:
        """
        Accumulator for a ``dashboard`` directive.

        The first directive binds the primary dashboard; later sibling
        directives get their own accumulator on the same render context.
        """
        if not self.dashboards:
            dashboard = self.dashboard
        else:
            dashboard = Dashboard(widget=self.dashboard.widget, render_context=self.render_context)

        self.dashboards.append(dashboard)
        return dashboard

    def active_dashboard(self) -> Dashboard:
        """Dashboard a chart directive appends to: the enclosing one, else the primary."""
        return self.render_context.get(ATTR_CHART_DASHBOARD) or self.dashboard

    def resolve_widget(self, widget_id: str) -> ChartWidget:
        """
        Look a chart widget up by id.

        Raises:
            WidgetNotFoundError: If the widget source has no such widget
        """
        widget = self.widget_source.get(widget_id)
        if widget is None:
            raise WidgetNotFoundError(widget_id)
        return widget

    def all_charts(self) -> list[Chart]:
        """Charts of every dashboard in this pass, in encounter order per dashboard."""
        charts = []
        for dashboard in self.dashboards or [self.dashboard]:
            charts.extend(dashboard.charts)
        return charts
