"""
Tests for the render error hierarchy
"""

import pytest

from dashforge.core import (
    DashboardRenderError,
    DashboardStateError,
    DirectiveContextError,
    DirectiveError,
    ParameterTypeError,
    ParameterValueError,
    RenderOutputError,
    WidgetNotFoundError,
)


class TestHierarchy:
    """Errors can be caught by render category or by builtin category"""

    @pytest.mark.parametrize(
        "error_class, builtin",
        [
            (ParameterTypeError, TypeError),
            (ParameterValueError, ValueError),
            (WidgetNotFoundError, LookupError),
            (RenderOutputError, OSError),
        ],
    )
    def test_builtin_bases(self, error_class, builtin):
        assert issubclass(error_class, builtin)
        assert issubclass(error_class, DashboardRenderError)

    @pytest.mark.parametrize(
        "error_class",
        [ParameterTypeError, ParameterValueError, WidgetNotFoundError, DirectiveContextError],
    )
    def test_directive_errors(self, error_class):
        assert issubclass(error_class, DirectiveError)

    def test_state_error_is_not_directive_error(self):
        assert not issubclass(DashboardStateError, DirectiveError)


class TestAttributes:
    """Errors carry the directive and parameter that failed"""

    def test_parameter_error(self):
        error = ParameterValueError("bad var", directive="dashboard", parameter="var")
        assert str(error) == "bad var"
        assert error.directive == "dashboard"
        assert error.parameter == "var"

    def test_widget_not_found(self):
        error = WidgetNotFoundError("revenue")
        assert error.widget_id == "revenue"
        assert error.directive == "chart"
        assert str(error) == "Chart widget not found: 'revenue'"

    def test_render_output_error_message(self):
        assert str(RenderOutputError("sink closed")) == "sink closed"
