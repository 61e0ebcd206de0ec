"""
Dashboard domain models

    - TemplateDashboardWidget: Which template a dashboard is rendered from
    - Chart: Rendered result of one chart widget (immutable)
    - Dashboard: Accumulator built during one render pass
"""

import uuid
from dataclasses import dataclass, field

from ..core.errors import DashboardStateError
from .render_context import RenderContext


@dataclass(frozen=True)
class TemplateDashboardWidget:
    """
    A dashboard defined by a template file.

    Attributes:
        id: Widget identifier, also the template directory name
        template: Template file name inside the widget directory
    """

    id: str
    template: str = "index.html"


@dataclass(frozen=True)
class Chart:
    """
    Rendered chart, immutable once appended to a Dashboard.

    Attributes:
        widget_id: Identifier of the widget that produced this chart
        var_name: JavaScript variable the chart script assigns
        element_id: HTML element the chart draws into
        script: Script fragment; unwrapped when rendered for the chart directive
        element_html: Markup to place in the page before the script, may be empty
    """

    widget_id: str
    var_name: str
    element_id: str
    script: str
    element_html: str = ""


@dataclass
class Dashboard:
    """
    Dashboard accumulator for one render pass.

    The variable name is assigned exactly once by the dashboard directive.
    Charts are appended in directive encounter order, which is also the order
    the generated initializer hands them to the client-side dashboard.

    Attributes:
        widget: Template widget this dashboard is rendered from
        render_context: Context of the owning render pass
        id: Unique id of this rendered instance
        charts: Charts in encounter order
    """

    widget: TemplateDashboardWidget
    render_context: RenderContext
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    charts: list[Chart] = field(default_factory=list)
    _var_name: str | None = field(default=None, init=False, repr=False)

    @property
    def var_name(self) -> str | None:
        return self._var_name

    @var_name.setter
    def var_name(self, value: str) -> None:
        if self._var_name is not None:
            raise DashboardStateError(
                f"Dashboard variable name already assigned: '{self._var_name}' (attempted '{value}')"
            )
        self._var_name = value

    @property
    def is_named(self) -> bool:
        return self._var_name is not None

    def add_chart(self, chart: Chart) -> None:
        self.charts.append(chart)

    def chart_var_names(self) -> list[str]:
        return [chart.var_name for chart in self.charts]
