"""
Template Dashboard Renderer

Renders dashboard templates with Jinja2, with the ``import``, ``theme``,
``dashboard`` and ``chart`` directives available as template globals.

Usage:
    from dashforge.dashboards.renderer import TemplateDashboardRenderer
    from dashforge.domain import InMemoryWidgetSource, TemplateDashboardWidget

    renderer = TemplateDashboardRenderer(InMemoryWidgetSource(widgets), config=get_config())
    result = renderer.render(TemplateDashboardWidget(id="sales"))
    html = result.html

Every call creates its own RenderPass, so one renderer can serve concurrent
requests. ``render`` returns nothing on failure; ``render_to`` streams, and
chunks written before a failure stay in the sink.
"""

import time
from dataclasses import dataclass
from io import StringIO
from typing import Any, TextIO

from jinja2 import BaseLoader, Environment, FileSystemLoader, select_autoescape

from ..config import ConfigurationError, RendererConfig, get_config
from ..core import get_logger, log_with_context
from ..core.errors import RenderOutputError
from ..domain.dashboard import Chart, Dashboard, TemplateDashboardWidget
from ..domain.render_context import RenderContext, WebContext
from ..domain.widgets import WidgetSource
from ..framework import get_import_markup, get_theme_markup
from ..utils.error_handling import log_and_raise
from .directives import DirectiveDispatcher
from .render_pass import RENDER_PASS_KEY, RenderPass
from .resources import DashboardWidgetResManager

logger = get_logger(__name__)

STRING_TEMPLATE_WIDGET_ID = "inline"


@dataclass
class RenderResult:
    """
    Output of a completed render pass.

    Attributes:
        html: Rendered document
        render_pass: State the pass built (dashboards, charts, context)
    """

    html: str
    render_pass: RenderPass

    @property
    def dashboard(self) -> Dashboard:
        return self.render_pass.dashboard

    @property
    def dashboards(self) -> list[Dashboard]:
        return self.render_pass.dashboards

    @property
    def charts(self) -> list[Chart]:
        return self.render_pass.all_charts()

    @property
    def render_context(self) -> RenderContext:
        return self.render_pass.render_context

    def __str__(self) -> str:
        return self.html


class TemplateDashboardRenderer:
    """
    Jinja2-backed dashboard renderer.

    The Jinja2 environment and the directive table are built once here and
    only read afterwards.

    Args:
        widget_source: Resolves ``chart(widget=...)`` ids
        config: Renderer configuration (default: from environment)
        dispatcher: Directive table (default: the four built-in directives)
    """

    def __init__(
        self,
        widget_source: WidgetSource,
        config: RendererConfig | None = None,
        dispatcher: DirectiveDispatcher | None = None,
    ):
        self.widget_source = widget_source
        self.config = config if config is not None else get_config()
        self.dispatcher = dispatcher if dispatcher is not None else DirectiveDispatcher()

        if self.config.template_root is not None:
            self.res_manager: DashboardWidgetResManager | None = DashboardWidgetResManager(self.config.template_root)
            loader: BaseLoader | None = FileSystemLoader(
                self.config.template_root, encoding=self.config.default_template_encoding
            )
        else:
            self.res_manager = None
            loader = None

        self.env = Environment(
            loader=loader,
            autoescape=select_autoescape(["html", "xml"], default_for_string=True),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.dispatcher.register(self.env)

    # Page hooks used by the import / theme directives

    def import_markup(self, render_pass: RenderPass) -> str:
        return get_import_markup(render_pass.render_context.web_context.context_path)

    def theme_markup(self, render_pass: RenderPass) -> str:
        return get_theme_markup(
            render_pass.theme_name,
            ignore_border_width=self.config.ignore_dashboard_style_border_width,
        )

    def new_render_pass(
        self,
        widget: TemplateDashboardWidget,
        context_path: str | None = None,
        theme: str | None = None,
    ) -> RenderPass:
        """
        Fresh state for one render: render context plus primary dashboard.
        """
        web_context = WebContext(context_path=self.config.context_path if context_path is None else context_path)
        dashboard = Dashboard(widget=widget, render_context=RenderContext(web_context=web_context))
        return RenderPass(dashboard=dashboard, widget_source=self.widget_source, hooks=self, theme_name=theme)

    def get_template(self, widget: TemplateDashboardWidget):
        """
        Load the template of a dashboard widget.

        Raises:
            ConfigurationError: If no template root is configured
            ValidationError: If the widget id or template name escapes the root
            jinja2.TemplateNotFound: If the file does not exist
        """
        if self.res_manager is None:
            raise ConfigurationError("DASHFORGE_TEMPLATE_ROOT is required to render template files")

        path = self.res_manager.get_relative_path(widget.id, widget.template)
        return self.env.get_template(path)

    def render(
        self,
        widget: TemplateDashboardWidget,
        context_path: str | None = None,
        theme: str | None = None,
        **variables: Any,
    ) -> RenderResult:
        """
        Render a dashboard widget's template file.

        Args:
            widget: Dashboard widget to render
            context_path: Web context path override
            theme: Theme name for the ``theme`` directive
            **variables: Extra template variables

        Returns:
            RenderResult with the complete document
        """
        sink = StringIO()
        render_pass = self.render_to(widget, sink, context_path=context_path, theme=theme, **variables)
        return RenderResult(html=sink.getvalue(), render_pass=render_pass)

    def render_string(
        self,
        source: str,
        widget: TemplateDashboardWidget | None = None,
        context_path: str | None = None,
        theme: str | None = None,
        **variables: Any,
    ) -> RenderResult:
        """
        Render a template given as text.

        Example:
            result = renderer.render_string(
                '{% call dashboard() %}{{ chart(widget="revenue") }}{% endcall %}'
            )
        """
        widget = widget or TemplateDashboardWidget(id=STRING_TEMPLATE_WIDGET_ID, template="<string>")
        template = self.env.from_string(source)
        render_pass = self.new_render_pass(widget, context_path=context_path, theme=theme)

        sink = StringIO()
        self._process(template, render_pass, sink, variables)
        return RenderResult(html=sink.getvalue(), render_pass=render_pass)

    def render_to(
        self,
        widget: TemplateDashboardWidget,
        sink: TextIO,
        context_path: str | None = None,
        theme: str | None = None,
        **variables: Any,
    ) -> RenderPass:
        """
        Stream a dashboard widget's template into a writable text sink.

        Returns:
            The RenderPass, for inspecting dashboards and charts

        Raises:
            RenderOutputError: If writing to the sink fails
            DirectiveError: If a directive fails (partial output is not retracted)
        """
        template = self.get_template(widget)
        render_pass = self.new_render_pass(widget, context_path=context_path, theme=theme)
        self._process(template, render_pass, sink, variables)
        return render_pass

    def _process(self, template, render_pass: RenderPass, sink: TextIO, variables: dict[str, Any]) -> None:
        clashes = sorted(set(variables) & (set(self.dispatcher.names) | {RENDER_PASS_KEY}))
        if clashes:
            raise ValueError(f"Template variable(s) shadow a directive: {', '.join(clashes)}")

        widget_id = render_pass.dashboard.widget.id
        template_vars = {
            "contextPath": render_pass.render_context.web_context.context_path,
            **variables,
            RENDER_PASS_KEY: render_pass,
        }

        start = time.perf_counter()
        try:
            for chunk in template.generate(template_vars):
                try:
                    sink.write(chunk)
                except OSError as e:
                    raise RenderOutputError(f"Failed writing dashboard output: {e}") from e
        except Exception as e:
            log_and_raise(
                logger,
                e,
                context={"widget_id": widget_id, "template": render_pass.dashboard.widget.template},
                error_type="Dashboard render",
            )

        log_with_context(
            logger,
            "info",
            "Dashboard rendered",
            widget_id=widget_id,
            dashboard_count=len(render_pass.dashboards),
            chart_count=len(render_pass.all_charts()),
            duration_ms=round((time.perf_counter() - start) * 1000, 2),
        )
