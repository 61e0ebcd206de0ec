"""
Identifier generation for a render pass

Names are derived from the render context's sequence counter. A directive
threads one sequence value through all of its names so a single invocation
consumes at most one slot, and explicit names never consume one:

    seq = NO_SEQUENCE
    if not var:
        seq = next_sequence(context, seq)
        var = chart_var_name(seq)
    if not element_id:
        seq = next_sequence(context, seq)    # same value as above
        element_id = chart_element_id(seq)
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .render_context import RenderContext

NO_SEQUENCE = -1

DASHBOARD_VAR_PREFIX = "dashboard"
CHART_VAR_PREFIX = "chart"
CHART_ELEMENT_ID_SUFFIX = "element"
RENDER_CONTEXT_VAR_PREFIX = "renderContext"


def next_sequence(context: "RenderContext", current: int = NO_SEQUENCE) -> int:
    """
    Return ``current`` if already allocated, otherwise allocate a new sequence.

    Args:
        context: Render context owning the counter
        current: Sequence already allocated in this invocation, or NO_SEQUENCE

    Returns:
        Sequence value to use for generated names
    """
    if current >= 0:
        return current

    return context.advance_sequence()


def dashboard_var_name(sequence: int) -> str:
    """Generated dashboard variable name, e.g. ``dashboard0``."""
    return f"{DASHBOARD_VAR_PREFIX}{sequence}"


def chart_var_name(sequence: int) -> str:
    """Generated chart variable name, e.g. ``chart3``."""
    return f"{CHART_VAR_PREFIX}{sequence}"


def chart_element_id(sequence: int) -> str:
    """Generated chart element id, e.g. ``chart3element``."""
    return f"{CHART_VAR_PREFIX}{sequence}{CHART_ELEMENT_ID_SUFFIX}"


def render_context_var_name(sequence: int) -> str:
    """Generated temporary render-context variable name, e.g. ``renderContext0``."""
    return f"{RENDER_CONTEXT_VAR_PREFIX}{sequence}"
