"""
Render Errors

Exception hierarchy raised while rendering a dashboard template.

All errors propagate synchronously to the caller of the top-level render
operation. Nothing here is retried or swallowed; the caller decides whether a
failed pass becomes an error page, a partial page or an aborted response.

Hierarchy:
    DashboardRenderError
    ├── DirectiveError
    │   ├── ParameterTypeError      (also TypeError)
    │   ├── ParameterValueError     (also ValueError)
    │   ├── WidgetNotFoundError     (also LookupError)
    │   └── DirectiveContextError
    ├── DashboardStateError
    └── RenderOutputError           (also OSError)
"""


class DashboardRenderError(Exception):
    """Base class for every failure raised by a render pass."""

    pass


class DirectiveError(DashboardRenderError):
    """
    Raised when a template directive cannot execute.

    Attributes:
        directive: Name of the directive that failed (e.g. "chart")
    """

    def __init__(self, message: str, directive: str | None = None):
        super().__init__(message)
        self.directive = directive


class ParameterTypeError(DirectiveError, TypeError):
    """A directive parameter could not be coerced to text, or is not recognised."""

    def __init__(self, message: str, directive: str | None = None, parameter: str | None = None):
        super().__init__(message, directive)
        self.parameter = parameter


class ParameterValueError(DirectiveError, ValueError):
    """A directive parameter is missing or has a malformed value."""

    def __init__(self, message: str, directive: str | None = None, parameter: str | None = None):
        super().__init__(message, directive)
        self.parameter = parameter


class WidgetNotFoundError(DirectiveError, LookupError):
    """
    The widget referenced by a chart directive does not exist.

    Fatal for the render pass: a dashboard with a dangling chart reference
    must not render as a partial page.
    """

    def __init__(self, widget_id: str, directive: str | None = "chart"):
        super().__init__(f"Chart widget not found: '{widget_id}'", directive)
        self.widget_id = widget_id


class DirectiveContextError(DirectiveError):
    """A directive was invoked outside a dashboard render pass."""

    pass


class DashboardStateError(DashboardRenderError):
    """A dashboard accumulator was mutated in a way its lifecycle forbids."""

    pass


class RenderOutputError(DashboardRenderError, OSError):
    """Writing rendered output to the sink failed. Not retried."""

    pass
