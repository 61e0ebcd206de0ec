"""
Output Emitter

Low-level helpers that write script and markup fragments for directives.

Directive output is collected in a MarkupWriter and handed back to Jinja2 as
``Markup`` so auto-escaping leaves the generated script alone. Every value
interpolated into script goes through a validator or HTMLSanitizer first.

Usage:
    out = MarkupWriter()
    out.write_script_start()
    out.write_line("var dashboard0 = dashboardFactory.create({...});")
    out.write_script_end()
    html = out.getvalue()
"""

from io import StringIO
from typing import Any

from markupsafe import Markup

from ..domain.dashboard import Dashboard
from ..framework import DASHBOARD_FACTORY
from ..security import HTMLSanitizer

SCRIPT_START_TAG = '<script type="text/javascript">'
SCRIPT_END_TAG = "</script>"
NEW_LINE = "\n"


class MarkupWriter:
    """
    Buffer for one directive's output.
    """

    def __init__(self):
        self._buffer = StringIO()

    def write(self, text: str) -> None:
        self._buffer.write(text)

    def write_line(self, text: str = "") -> None:
        self._buffer.write(text)
        self._buffer.write(NEW_LINE)

    def write_new_line(self) -> None:
        self._buffer.write(NEW_LINE)

    def write_script_start(self) -> None:
        self.write_line(SCRIPT_START_TAG)

    def write_script_end(self) -> None:
        self.write_line(SCRIPT_END_TAG)

    def write_script(self, script: str) -> None:
        """Write a script fragment wrapped in its own script tag."""
        self.write_script_start()
        self.write(script)
        if script and not script.endswith(NEW_LINE):
            self.write_new_line()
        self.write_script_end()

    def getvalue(self) -> Markup:
        return Markup(self._buffer.getvalue())


def dashboard_options(dashboard: Dashboard) -> dict[str, Any]:
    """
    Options object handed to ``dashboardFactory.create``.

    Args:
        dashboard: Dashboard being declared

    Returns:
        JSON-serializable dict
    """
    context = dashboard.render_context
    return {
        "id": dashboard.id,
        "widgetId": dashboard.widget.id,
        "varName": dashboard.var_name,
        "renderContext": {
            "contextPath": context.web_context.context_path,
        },
    }


def write_dashboard_declaration(out: MarkupWriter, dashboard: Dashboard) -> None:
    """
    Write ``var <name> = dashboardFactory.create(<options>);``.

    Args:
        out: Target writer
        dashboard: Dashboard with its variable name assigned
    """
    options = HTMLSanitizer.to_script_json(dashboard_options(dashboard))
    out.write_line(f"var {dashboard.var_name} = {DASHBOARD_FACTORY}.create({options});")


def write_dashboard_initializer(
    out: MarkupWriter,
    dashboard: Dashboard,
    render_context_var: str,
    listener: str | None = None,
) -> None:
    """
    Write the script that hands charts to the dashboard and renders it.

    Args:
        out: Target writer
        dashboard: Dashboard whose charts are complete
        render_context_var: Temporary variable bound to the dashboard's render context
        listener: Optional listener reference; the argument is omitted when None
    """
    var_name = dashboard.var_name
    out.write_line(f"var {render_context_var} = {var_name}.renderContext;")
    out.write_line(f"{var_name}.charts = [{', '.join(dashboard.chart_var_names())}];")

    init_args = [var_name, render_context_var]
    if listener:
        init_args.append(listener)

    out.write_line(f"{DASHBOARD_FACTORY}.init({', '.join(init_args)});")
    out.write_line(f"{var_name}.render();")
