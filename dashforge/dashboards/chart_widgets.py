"""
Script Chart Widget

Default ChartWidget implementation. Renders a chart as an element placeholder
plus a ``chartFactory.create(...)`` call, following the chart flags the chart
directive places in the render context:

    chart.varName / chart.elementId      names to use
    chart.renderContextVar               expression reaching the dashboard's render context
    chart.notRenderScriptTag             leave out the surrounding <script> tag
    chart.scriptNotInvokeRender          leave out the ``<var>.render()`` call

A widget rendered outside any directive (flags absent) generates its own
names, wraps its script and renders itself.
"""

from dataclasses import dataclass, field
from typing import Any

from ..domain.dashboard import Chart
from ..domain.identifiers import chart_element_id, chart_var_name, next_sequence
from ..domain.render_context import (
    ATTR_CHART_ELEMENT_ID,
    ATTR_CHART_NOT_RENDER_SCRIPT_TAG,
    ATTR_CHART_RENDER_CONTEXT_VAR,
    ATTR_CHART_SCRIPT_NOT_INVOKE_RENDER,
    ATTR_CHART_VAR_NAME,
    RenderContext,
)
from ..framework import CHART_FACTORY
from ..security import HTMLSanitizer
from .emitter import MarkupWriter


@dataclass(frozen=True)
class ScriptChartWidget:
    """
    Chart widget backed by the client-side chart factory.

    Attributes:
        id: Widget identifier referenced by ``chart(widget=...)``
        chart_type: Client-side chart type ("bar", "line", "pie", ...)
        title: Display title
        options: Extra JSON-serializable options passed to the factory
    """

    id: str
    chart_type: str = "bar"
    title: str = ""
    options: dict[str, Any] = field(default_factory=dict)

    def render(self, context: RenderContext) -> Chart:
        sequence = -1
        var_name = context.get(ATTR_CHART_VAR_NAME)
        element_id = context.get(ATTR_CHART_ELEMENT_ID)

        if not var_name:
            sequence = next_sequence(context, sequence)
            var_name = chart_var_name(sequence)

        if not element_id:
            sequence = next_sequence(context, sequence)
            element_id = chart_element_id(sequence)

        render_context_var = context.get(ATTR_CHART_RENDER_CONTEXT_VAR) or "null"
        factory_options = HTMLSanitizer.to_script_json(
            {
                "id": f"{self.id}-{var_name}",
                "widgetId": self.id,
                "elementId": element_id,
                "type": self.chart_type,
                "title": self.title,
                "options": self.options,
            }
        )

        lines = [f"var {var_name} = {CHART_FACTORY}.create({factory_options}, {render_context_var});"]
        if not context.get(ATTR_CHART_SCRIPT_NOT_INVOKE_RENDER, False):
            lines.append(f"{var_name}.render();")

        script = "\n".join(lines) + "\n"
        if not context.get(ATTR_CHART_NOT_RENDER_SCRIPT_TAG, False):
            out = MarkupWriter()
            out.write_script(script)
            script = str(out.getvalue())

        element_html = (
            f'<div id="{HTMLSanitizer.escape_html_attribute(element_id)}" class="dg-chart" '
            f'data-widget-id="{HTMLSanitizer.escape_html_attribute(self.id)}"></div>\n'
        )

        return Chart(
            widget_id=self.id,
            var_name=var_name,
            element_id=element_id,
            script=script,
            element_html=element_html,
        )
