"""
Tests for ScriptChartWidget
"""

import json

import pytest

from dashforge.dashboards import ScriptChartWidget
from dashforge.domain import RenderContext
from dashforge.domain.render_context import (
    ATTR_CHART_ELEMENT_ID,
    ATTR_CHART_NOT_RENDER_SCRIPT_TAG,
    ATTR_CHART_RENDER_CONTEXT_VAR,
    ATTR_CHART_SCRIPT_NOT_INVOKE_RENDER,
    ATTR_CHART_VAR_NAME,
)


@pytest.fixture
def widget():
    return ScriptChartWidget(id="revenue", chart_type="line", title="Revenue", options={"currency": "EUR"})


def factory_options(script):
    start = script.index("chartFactory.create(") + len("chartFactory.create(")
    end = script.rindex("}, ") + 1
    return json.loads(script[start:end])


class TestStandaloneRender:
    """Tests for rendering with no chart flags set"""

    def test_generates_names(self, widget):
        context = RenderContext()
        chart = widget.render(context)

        assert chart.var_name == "chart0"
        assert chart.element_id == "chart0element"
        assert context.sequence == 1

    def test_wraps_and_renders(self, widget):
        chart = widget.render(RenderContext())

        assert chart.script.startswith('<script type="text/javascript">\n')
        assert "chart0.render();" in chart.script
        assert "}, null);" in chart.script

    def test_factory_options(self, widget):
        chart = widget.render(RenderContext())

        assert factory_options(chart.script) == {
            "id": "revenue-chart0",
            "widgetId": "revenue",
            "elementId": "chart0element",
            "type": "line",
            "title": "Revenue",
            "options": {"currency": "EUR"},
        }

    def test_element_html(self, widget):
        chart = widget.render(RenderContext())
        assert chart.element_html == '<div id="chart0element" class="dg-chart" data-widget-id="revenue"></div>\n'


class TestDirectedRender:
    """Tests for rendering with the chart directive's flags"""

    def test_follows_flags(self, widget):
        context = RenderContext()
        context.set(ATTR_CHART_VAR_NAME, "revenueChart")
        context.set(ATTR_CHART_ELEMENT_ID, "revenue")
        context.set(ATTR_CHART_RENDER_CONTEXT_VAR, "sales.renderContext")
        context.set(ATTR_CHART_NOT_RENDER_SCRIPT_TAG, True)
        context.set(ATTR_CHART_SCRIPT_NOT_INVOKE_RENDER, True)

        chart = widget.render(context)

        assert chart.var_name == "revenueChart"
        assert chart.element_id == "revenue"
        assert context.sequence == 0
        assert "<script" not in chart.script
        assert "revenueChart.render();" not in chart.script
        assert chart.script.startswith("var revenueChart = chartFactory.create(")
        assert chart.script.endswith("}, sales.renderContext);\n")


class TestEscaping:
    """Tests for values that could break out of the script block"""

    def test_title_cannot_close_script(self):
        chart = ScriptChartWidget(id="x", title="</script><script>alert(1)</script>").render(RenderContext())

        assert "</script><script>alert(1)" not in chart.script
        assert "\\u003c/script\\u003e" in chart.script

    def test_widget_id_escaped_in_element(self):
        chart = ScriptChartWidget(id='x" onclick="alert(1)').render(RenderContext())
        assert 'onclick="' not in chart.element_html
