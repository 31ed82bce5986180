"""seqlayout -- auto-layout for sequence diagram graphs."""

from __future__ import annotations

from .types import Point, Box, LayoutOptions
from .graph import Graph, Object, Edge, Label
from .context import LayoutContext
from .errors import LayoutError, InvalidGraphError, LayoutCancelledError
from .sequence.layout import layout_sequence_diagram

__all__ = [
    "layout",
    "layout_sequence_diagram",
    "Point",
    "Box",
    "LayoutOptions",
    "Graph",
    "Object",
    "Edge",
    "Label",
    "LayoutContext",
    "LayoutError",
    "InvalidGraphError",
    "LayoutCancelledError",
]


def layout(
    ctx: LayoutContext | None,
    graph: Graph,
    options: LayoutOptions | None = None,
) -> None:
    """Compute a full sequence diagram layout for ``graph``, in place."""
    layout_sequence_diagram(ctx, graph, options)
