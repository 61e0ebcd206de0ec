"""
Pytest configuration and shared fixtures

Provides chart widgets, widget sources, renderers and on-disk template roots.
"""

import pytest

from dashforge.config import RendererConfig
from dashforge.dashboards import ScriptChartWidget, TemplateDashboardRenderer
from dashforge.dashboards.render_pass import RenderPass
from dashforge.domain import Dashboard, InMemoryWidgetSource, RenderContext, TemplateDashboardWidget

# ===== Widget Fixtures =====


@pytest.fixture
def chart_widgets():
    """Provide chart widgets A, B, C plus revenue/orders"""
    return [
        ScriptChartWidget(id="A", chart_type="bar", title="Alpha"),
        ScriptChartWidget(id="B", chart_type="line", title="Beta"),
        ScriptChartWidget(id="C", chart_type="pie", title="Gamma"),
        ScriptChartWidget(id="revenue", chart_type="line", title="Revenue", options={"currency": "EUR"}),
        ScriptChartWidget(id="orders", chart_type="bar", title="Orders"),
    ]


@pytest.fixture
def widget_source(chart_widgets):
    """Provide an in-memory widget source"""
    return InMemoryWidgetSource(chart_widgets)


# ===== Renderer Fixtures =====


@pytest.fixture
def renderer(widget_source):
    """Provide a renderer for string templates (no template root)"""
    return TemplateDashboardRenderer(widget_source, config=RendererConfig())


@pytest.fixture
def template_root(tmp_path):
    """Create a template root with a 'sales' dashboard"""
    sales_dir = tmp_path / "sales"
    sales_dir.mkdir()
    (sales_dir / "index.html").write_text(
        "<html><head>\n"
        "{{ import() }}\n"
        "{{ theme() }}\n"
        "</head><body>\n"
        '{% call dashboard(var="salesDashboard", listener="salesListener") %}\n'
        '{{ chart(widget="revenue") }}\n'
        '{{ chart(widget="orders", var="ordersChart", elementId="orders") }}\n'
        "{% endcall %}\n"
        "</body></html>\n",
        encoding="utf-8",
    )
    return tmp_path


@pytest.fixture
def file_renderer(widget_source, template_root):
    """Provide a renderer bound to the template root"""
    return TemplateDashboardRenderer(widget_source, config=RendererConfig(template_root=template_root))


# ===== Render Pass Fixtures =====


class StubHooks:
    """Page hooks returning fixed markup"""

    def import_markup(self, render_pass):
        return "<!-- import -->"

    def theme_markup(self, render_pass):
        return "<!-- theme -->"


@pytest.fixture
def render_pass(widget_source):
    """Provide a fresh RenderPass with stub page hooks"""
    dashboard = Dashboard(widget=TemplateDashboardWidget(id="test"), render_context=RenderContext())
    return RenderPass(dashboard=dashboard, widget_source=widget_source, hooks=StubHooks())
