"""
Tests for RenderContext
"""

import pytest

from dashforge.domain.render_context import (
    ATTR_CHART_RENDER_CONTEXT_VAR,
    ATTR_CHART_VAR_NAME,
    RenderContext,
    WebContext,
)


class TestAttributes:
    """Tests for get/set/remove"""

    def test_set_and_get(self):
        context = RenderContext()
        context.set("key", "value")
        assert context.get("key") == "value"
        assert context.has("key")

    def test_get_default(self):
        context = RenderContext()
        assert context.get("missing") is None
        assert context.get("missing", 42) == 42

    def test_remove_returns_value(self):
        context = RenderContext()
        context.set("key", "value")
        assert context.remove("key") == "value"
        assert not context.has("key")

    def test_remove_missing_is_noop(self):
        context = RenderContext()
        assert context.remove("missing") is None

    def test_keys(self):
        context = RenderContext()
        context.set("a", 1)
        context.set("b", 2)
        assert sorted(context.keys()) == ["a", "b"]

    def test_web_context_default(self):
        context = RenderContext()
        assert context.web_context == WebContext(context_path="")


class TestSequence:
    """Tests for the sequence counter"""

    def test_advance_returns_then_increments(self):
        context = RenderContext()
        assert context.advance_sequence() == 0
        assert context.advance_sequence() == 1
        assert context.sequence == 2


class TestScoped:
    """Tests for scoped attribute installation"""

    def test_installs_and_removes(self):
        """Test attributes exist inside the block and are gone after"""
        context = RenderContext()
        with context.scoped({ATTR_CHART_RENDER_CONTEXT_VAR: "dashboard0.renderContext"}):
            assert context.get(ATTR_CHART_RENDER_CONTEXT_VAR) == "dashboard0.renderContext"
        assert not context.has(ATTR_CHART_RENDER_CONTEXT_VAR)

    def test_removes_on_exception(self):
        """Test attributes are removed when the block raises"""
        context = RenderContext()
        with pytest.raises(RuntimeError):
            with context.scoped({ATTR_CHART_VAR_NAME: "chart0"}):
                raise RuntimeError("body failed")
        assert not context.has(ATTR_CHART_VAR_NAME)

    def test_restores_previous_value(self):
        """Test a nested scope restores the outer value"""
        context = RenderContext()
        with context.scoped({ATTR_CHART_VAR_NAME: "outer"}):
            with context.scoped({ATTR_CHART_VAR_NAME: "inner"}):
                assert context.get(ATTR_CHART_VAR_NAME) == "inner"
            assert context.get(ATTR_CHART_VAR_NAME) == "outer"
        assert not context.has(ATTR_CHART_VAR_NAME)

    def test_leaves_other_attributes_alone(self):
        """Test only the scoped keys are touched"""
        context = RenderContext()
        context.set("other", 1)
        with context.scoped({"scoped": 2}):
            context.set("added-inside", 3)
        assert context.get("other") == 1
        assert context.get("added-inside") == 3
        assert not context.has("scoped")
