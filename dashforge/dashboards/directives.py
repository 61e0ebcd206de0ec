"""
Template Directives

The four directives a dashboard template can use, and the dispatcher that
registers them with a Jinja2 environment:

    {{ import() }}
    {{ theme() }}
    {% call dashboard(var="sales", listener="salesListener") %}
        {{ chart(widget="revenue") }}
        {{ chart(widget="orders", var="ordersChart", elementId="orders") }}
    {% endcall %}

Handlers are shared by every render pass running in the process, so they keep
no per-render fields. Everything a handler touches arrives as an argument:
its typed parameters, the RenderPass, and the body callback (Jinja2's
``caller`` for ``{% call %}`` blocks).
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Any, ClassVar

from jinja2 import Environment, Undefined, pass_context
from jinja2.runtime import Context
from markupsafe import Markup

from ..core import get_logger
from ..core.errors import DirectiveContextError, ParameterTypeError, ParameterValueError
from ..domain.identifiers import (
    NO_SEQUENCE,
    chart_element_id,
    chart_var_name,
    dashboard_var_name,
    next_sequence,
    render_context_var_name,
)
from ..domain.render_context import (
    ATTR_CHART_DASHBOARD,
    ATTR_CHART_ELEMENT_ID,
    ATTR_CHART_NOT_RENDER_SCRIPT_TAG,
    ATTR_CHART_RENDER_CONTEXT_VAR,
    ATTR_CHART_SCRIPT_NOT_INVOKE_RENDER,
    ATTR_CHART_VAR_NAME,
    CHART_SCRATCH_ATTRIBUTES,
)
from ..security import IdentifierValidator, ValidationError
from .emitter import MarkupWriter, write_dashboard_declaration, write_dashboard_initializer
from .render_pass import RENDER_PASS_KEY, RenderPass

logger = get_logger(__name__)

DIRECTIVE_IMPORT = "import"
DIRECTIVE_THEME = "theme"
DIRECTIVE_DASHBOARD = "dashboard"
DIRECTIVE_CHART = "chart"

Body = Callable[[], str]


def param(name: str, required: bool = False, validator: Callable[[str], str] | None = None) -> Any:
    """
    Declare a directive parameter on a params dataclass.

    Args:
        name: Parameter name as written in the template (e.g. "elementId")
        required: Reject the directive when the parameter is absent or empty
        validator: Raises ValidationError for malformed values
    """
    return field(default=None, metadata={"param": name, "required": required, "validator": validator})


@dataclass(frozen=True)
class NoParams:
    pass


@dataclass(frozen=True)
class DashboardParams:
    var: str | None = param("var", validator=IdentifierValidator.validate_js_identifier)
    listener: str | None = param("listener", validator=IdentifierValidator.validate_js_reference)


@dataclass(frozen=True)
class ChartParams:
    widget: str | None = param("widget", required=True)
    var: str | None = param("var", validator=IdentifierValidator.validate_js_identifier)
    element_id: str | None = param("elementId", validator=IdentifierValidator.validate_element_id)


def coerce_text(directive: str, name: str, value: Any) -> str | None:
    """
    Coerce one raw template value to text.

    ``None``, undefined template variables and empty strings all mean
    "not supplied". Strings (including Markup) pass through. Anything else
    is a ParameterTypeError.
    """
    if value is None or isinstance(value, Undefined):
        return None

    if isinstance(value, str):
        text = str(value)
        return text or None

    raise ParameterTypeError(
        f"Directive '{directive}' parameter '{name}': can not get string from [{type(value).__name__}] instance",
        directive=directive,
        parameter=name,
    )


class Directive(ABC):
    """
    Stateless directive handler.

    Subclasses declare ``name`` and a frozen ``params_type`` dataclass and
    implement ``execute``.
    """

    name: ClassVar[str]
    params_type: ClassVar[type] = NoParams

    def parse_params(self, raw: Mapping[str, Any]) -> Any:
        """
        Extract typed parameters from the raw keyword arguments.

        Raises:
            ParameterTypeError: Unknown parameter, or a value that is not text
            ParameterValueError: Missing required parameter, or malformed value
        """
        declared = {f.metadata["param"]: f for f in fields(self.params_type)}

        unknown = sorted(set(raw) - set(declared))
        if unknown:
            raise ParameterTypeError(
                f"Directive '{self.name}' does not accept parameter(s): {', '.join(unknown)}",
                directive=self.name,
                parameter=unknown[0],
            )

        values = {}
        for param_name, param_field in declared.items():
            text = coerce_text(self.name, param_name, raw.get(param_name))

            if text is None:
                if param_field.metadata["required"]:
                    raise ParameterValueError(
                        f"Directive '{self.name}' requires parameter '{param_name}'",
                        directive=self.name,
                        parameter=param_name,
                    )
            elif param_field.metadata["validator"] is not None:
                try:
                    param_field.metadata["validator"](text)
                except ValidationError as e:
                    raise ParameterValueError(
                        f"Directive '{self.name}' parameter '{param_name}': {e}",
                        directive=self.name,
                        parameter=param_name,
                    ) from e

            values[param_field.name] = text

        return self.params_type(**values)

    @abstractmethod
    def execute(self, params: Any, render_pass: RenderPass, body: Body | None) -> str:
        """Run the directive, returning the markup it emits."""


class ImportDirective(Directive):
    """Writes the framework CSS and runtime script."""

    name = DIRECTIVE_IMPORT

    def execute(self, params: NoParams, render_pass: RenderPass, body: Body | None) -> str:
        return Markup(render_pass.hooks.import_markup(render_pass))


class ThemeDirective(Directive):
    """Writes the dashboard theme style."""

    name = DIRECTIVE_THEME

    def execute(self, params: NoParams, render_pass: RenderPass, body: Body | None) -> str:
        return Markup(render_pass.hooks.theme_markup(render_pass))


class DashboardDirective(Directive):
    """
    Declares a dashboard, renders its body, then initializes it.

    Output:
        <script> var <var> = dashboardFactory.create({...}); </script>
        ... body (chart elements and scripts) ...
        <script> ... <var>.charts = [...]; dashboardFactory.init(...); <var>.render(); </script>

    The routing attributes installed for the body are removed on every exit
    path, together with any chart flags left behind, so sibling dashboards
    never see them. When the body raises, no initializer is written and the
    error propagates.
    """

    name = DIRECTIVE_DASHBOARD
    params_type = DashboardParams

    def execute(self, params: DashboardParams, render_pass: RenderPass, body: Body | None) -> str:
        context = render_pass.render_context
        sequence = NO_SEQUENCE

        var_name = params.var
        if not var_name:
            sequence = next_sequence(context, sequence)
            var_name = dashboard_var_name(sequence)

        dashboard = render_pass.open_dashboard()
        dashboard.var_name = var_name

        out = MarkupWriter()
        out.write_script_start()
        write_dashboard_declaration(out, dashboard)
        out.write_script_end()

        routing = {
            ATTR_CHART_RENDER_CONTEXT_VAR: f"{var_name}.renderContext",
            ATTR_CHART_DASHBOARD: dashboard,
        }

        try:
            with context.scoped(routing):
                if body is not None:
                    out.write(body())
        finally:
            for key in CHART_SCRATCH_ATTRIBUTES:
                context.remove(key)

        if sequence >= 0:
            render_context_var = render_context_var_name(sequence)
        else:
            render_context_var = f"{var_name}RenderContext"

        out.write_script_start()
        write_dashboard_initializer(out, dashboard, render_context_var, params.listener)
        out.write_script_end()

        logger.debug(
            "Dashboard directive rendered",
            extra={"var_name": var_name, "sequence": sequence, "chart_count": len(dashboard.charts)},
        )

        return out.getvalue()


class ChartDirective(Directive):
    """
    Renders one chart widget into the enclosing dashboard.

    Unnamed charts take their var name and element id from a single sequence
    value (``chart3`` / ``chart3element``).

    Raises:
        WidgetNotFoundError: If ``widget`` does not resolve
    """

    name = DIRECTIVE_CHART
    params_type = ChartParams

    def execute(self, params: ChartParams, render_pass: RenderPass, body: Body | None) -> str:
        widget = render_pass.resolve_widget(params.widget)
        context = render_pass.render_context
        sequence = NO_SEQUENCE

        var_name = params.var
        if not var_name:
            sequence = next_sequence(context, sequence)
            var_name = chart_var_name(sequence)

        element_id = params.element_id
        if not element_id:
            sequence = next_sequence(context, sequence)
            element_id = chart_element_id(sequence)

        chart_flags = {
            ATTR_CHART_NOT_RENDER_SCRIPT_TAG: True,
            ATTR_CHART_SCRIPT_NOT_INVOKE_RENDER: True,
            ATTR_CHART_VAR_NAME: var_name,
            ATTR_CHART_ELEMENT_ID: element_id,
        }

        with context.scoped(chart_flags):
            chart = widget.render(context)

        render_pass.active_dashboard().add_chart(chart)

        out = MarkupWriter()
        out.write(chart.element_html)
        out.write_script(chart.script)

        logger.debug(
            "Chart directive rendered",
            extra={"widget_id": params.widget, "var_name": chart.var_name, "element_id": chart.element_id},
        )

        return out.getvalue()


DEFAULT_DIRECTIVES: tuple[Directive, ...] = (
    ImportDirective(),
    ThemeDirective(),
    DashboardDirective(),
    ChartDirective(),
)


class DirectiveDispatcher:
    """
    Maps directive names to shared handler instances.

    The table is frozen at construction; ``register`` installs one Jinja2
    global per directive that looks up the RenderPass of the template being
    rendered and forwards to the handler.

    Example:
        dispatcher = DirectiveDispatcher()
        dispatcher.register(env)
    """

    def __init__(self, directives: tuple[Directive, ...] = DEFAULT_DIRECTIVES):
        self._handlers = MappingProxyType({directive.name: directive for directive in directives})

    @property
    def names(self) -> list[str]:
        return list(self._handlers)

    def get(self, name: str) -> Directive | None:
        return self._handlers.get(name)

    def dispatch(self, name: str, raw_params: Mapping[str, Any], render_pass: RenderPass, body: Body | None = None) -> str:
        """
        Run a directive by name.

        Raises:
            DirectiveContextError: If no directive has that name
        """
        handler = self._handlers.get(name)
        if handler is None:
            raise DirectiveContextError(f"Unknown directive: '{name}'", directive=name)

        params = handler.parse_params(raw_params)
        return handler.execute(params, render_pass, body)

    def register(self, env: Environment) -> None:
        for name in self._handlers:
            env.globals[name] = self._template_callable(name)

    def _template_callable(self, name: str) -> Callable[..., str]:
        @pass_context
        def directive(context: Context, *args: Any, caller: Body | None = None, **kwargs: Any) -> str:
            if args:
                raise ParameterTypeError(
                    f"Directive '{name}' only accepts named parameters",
                    directive=name,
                )

            render_pass = context.get(RENDER_PASS_KEY)
            if not isinstance(render_pass, RenderPass):
                raise DirectiveContextError(
                    f"Directive '{name}' used outside a dashboard render pass",
                    directive=name,
                )

            return self.dispatch(name, kwargs, render_pass, caller)

        directive.__name__ = name
        return directive
