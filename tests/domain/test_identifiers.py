"""
Tests for identifier generation
"""

from dashforge.domain.identifiers import (
    NO_SEQUENCE,
    chart_element_id,
    chart_var_name,
    dashboard_var_name,
    next_sequence,
    render_context_var_name,
)
from dashforge.domain.render_context import RenderContext


class TestNextSequence:
    """Tests for lazy sequence allocation"""

    def test_allocates_when_not_yet_allocated(self):
        """Test NO_SEQUENCE allocates the current counter value"""
        context = RenderContext()
        assert next_sequence(context, NO_SEQUENCE) == 0
        assert context.sequence == 1

    def test_reuses_allocated_sequence(self):
        """Test an allocated sequence is returned unchanged without advancing"""
        context = RenderContext()
        seq = next_sequence(context)
        assert next_sequence(context, seq) == seq
        assert context.sequence == 1

    def test_strictly_increasing_across_invocations(self):
        """Test separate invocations get increasing values"""
        context = RenderContext()
        values = [next_sequence(context) for _ in range(5)]
        assert values == [0, 1, 2, 3, 4]

    def test_starts_from_existing_counter(self):
        """Test allocation continues from the counter's current value"""
        context = RenderContext(sequence=7)
        assert next_sequence(context) == 7


class TestGeneratedNames:
    """Tests for name derivation"""

    def test_dashboard_var_name(self):
        assert dashboard_var_name(0) == "dashboard0"

    def test_chart_var_name(self):
        assert chart_var_name(3) == "chart3"

    def test_chart_element_id(self):
        assert chart_element_id(3) == "chart3element"

    def test_render_context_var_name(self):
        assert render_context_var_name(2) == "renderContext2"

    def test_roles_never_collide_for_same_sequence(self):
        """Test different roles with the same sequence produce distinct names"""
        names = {dashboard_var_name(1), chart_var_name(1), chart_element_id(1), render_context_var_name(1)}
        assert len(names) == 4

    def test_sequences_never_collide_for_same_role(self):
        """Test same role with different sequences produces distinct names"""
        names = {chart_var_name(i) for i in range(20)} | {chart_element_id(i) for i in range(20)}
        assert len(names) == 40
