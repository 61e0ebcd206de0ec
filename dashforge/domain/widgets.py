"""
Chart widget source interface

The directive engine never renders a chart itself. It looks a widget up by id
through a WidgetSource and asks the widget to render against the current
RenderContext.
"""

from collections.abc import Iterable, Mapping
from typing import Protocol, runtime_checkable

from .dashboard import Chart
from .render_context import RenderContext


@runtime_checkable
class ChartWidget(Protocol):
    """A renderable chart component."""

    id: str

    def render(self, context: RenderContext) -> Chart: ...


@runtime_checkable
class WidgetSource(Protocol):
    """Resolves chart widgets by identifier."""

    def get(self, widget_id: str) -> ChartWidget | None: ...


class InMemoryWidgetSource:
    """
    Dict-backed WidgetSource.

    The mapping is copied at construction and never mutated afterwards, so one
    instance can serve concurrent render passes.

    Example:
        source = InMemoryWidgetSource([revenue_widget, orders_widget])
        source.get("revenue")  # -> revenue_widget
        source.get("missing")  # -> None
    """

    def __init__(self, widgets: Iterable[ChartWidget] | Mapping[str, ChartWidget] = ()):
        if isinstance(widgets, Mapping):
            self._widgets = dict(widgets)
        else:
            self._widgets = {widget.id: widget for widget in widgets}

    def get(self, widget_id: str) -> ChartWidget | None:
        return self._widgets.get(widget_id)

    def __contains__(self, widget_id: object) -> bool:
        return widget_id in self._widgets

    def __len__(self) -> int:
        return len(self._widgets)

    def ids(self) -> list[str]:
        return sorted(self._widgets)
