"""
Render context for one render pass

A RenderContext carries the implicit state that composing directives hand to
the directives nested inside them (routing expression, chart flags) plus the
sequence counter used to generate unique names.

Exactly one render pass owns a context, so nothing here is locked. Any
attribute a directive installs must be removed by that same directive before
it returns; ``scoped()`` makes that removal unconditional.
"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any

# Attribute keys shared between the dashboard/chart directives and chart widgets
ATTR_CHART_RENDER_CONTEXT_VAR = "chart.renderContextVar"
ATTR_CHART_DASHBOARD = "chart.dashboard"
ATTR_CHART_NOT_RENDER_SCRIPT_TAG = "chart.notRenderScriptTag"
ATTR_CHART_SCRIPT_NOT_INVOKE_RENDER = "chart.scriptNotInvokeRender"
ATTR_CHART_VAR_NAME = "chart.varName"
ATTR_CHART_ELEMENT_ID = "chart.elementId"

CHART_SCRATCH_ATTRIBUTES = (
    ATTR_CHART_NOT_RENDER_SCRIPT_TAG,
    ATTR_CHART_SCRIPT_NOT_INVOKE_RENDER,
    ATTR_CHART_VAR_NAME,
    ATTR_CHART_ELEMENT_ID,
)

_MISSING = object()


@dataclass
class WebContext:
    """
    Request-level values the generated markup needs.

    Attributes:
        context_path: Web application context path ("" for root)
    """

    context_path: str = ""


@dataclass
class RenderContext:
    """
    Per-render-pass attribute store and sequence counter.

    Attributes:
        web_context: Request-level values (context path)
        attributes: Attribute key/value mapping
        sequence: Next sequence value to hand out

    Example:
        context = RenderContext()
        with context.scoped({ATTR_CHART_RENDER_CONTEXT_VAR: "dashboard0.renderContext"}):
            render_body()
        assert not context.has(ATTR_CHART_RENDER_CONTEXT_VAR)
    """

    web_context: WebContext = field(default_factory=WebContext)
    attributes: dict[str, Any] = field(default_factory=dict)
    sequence: int = 0

    def get(self, key: str, default: Any = None) -> Any:
        return self.attributes.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self.attributes[key] = value

    def remove(self, key: str) -> Any:
        """Remove an attribute, returning its value (None if absent)."""
        return self.attributes.pop(key, None)

    def has(self, key: str) -> bool:
        return key in self.attributes

    def keys(self) -> list[str]:
        return list(self.attributes)

    def advance_sequence(self) -> int:
        """Return the current sequence value and advance the counter."""
        value = self.sequence
        self.sequence += 1
        return value

    @contextmanager
    def scoped(self, attrs: Mapping[str, Any]) -> Iterator["RenderContext"]:
        """
        Install attributes for the duration of a block.

        On exit the installed keys are restored to whatever they held before
        (removed if they were absent), whether the block returns or raises.
        """
        previous = {key: self.attributes.get(key, _MISSING) for key in attrs}
        self.attributes.update(attrs)
        try:
            yield self
        finally:
            for key, value in previous.items():
                if value is _MISSING:
                    self.attributes.pop(key, None)
                else:
                    self.attributes[key] = value
