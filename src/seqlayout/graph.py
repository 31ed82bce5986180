from __future__ import annotations

from dataclasses import dataclass, field

from .types import Box, Point

# ============================================================================
# Diagram graph model
#
# A tree of objects hanging off an implicit root, plus an ordered edge list.
# Direct children of the root are actors; anything deeper is an activation
# span owned by its nearest actor ancestor. Objects and edges compare by
# identity so they can key dicts and sets during layout.
# ============================================================================


@dataclass(slots=True)
class Label:
    text: str
    # Measured label size. None means "estimate from the text".
    width: float | None = None
    height: float | None = None


@dataclass(slots=True, eq=False)
class Object:
    id: str
    graph: Graph = field(repr=False)
    parent: Object | None = field(default=None, repr=False)
    children: list[Object] = field(default_factory=list, repr=False)
    box: Box | None = None
    label: Label | None = None

    def ensure_child(self, path: list[str]) -> Object:
        """Return the descendant at ``path``, creating missing links on the way."""
        if not path:
            return self
        head, rest = path[0], path[1:]
        for child in self.children:
            if child.id == head:
                return child.ensure_child(rest)
        child = Object(id=head, graph=self.graph, parent=self, label=Label(text=head))
        self.children.append(child)
        self.graph.objects.append(child)
        return child.ensure_child(rest)

    def abs_id(self) -> str:
        parts: list[str] = []
        obj: Object | None = self
        while obj is not None and obj.parent is not None:
            parts.append(obj.id)
            obj = obj.parent
        return ".".join(reversed(parts))

    def is_actor(self) -> bool:
        return self.parent is not None and self.parent is self.graph.root

    def actor(self) -> Object:
        """Nearest top-level ancestor (the object itself for an actor)."""
        obj = self
        while obj.parent is not None and obj.parent is not self.graph.root:
            obj = obj.parent
        if obj.parent is None:
            raise ValueError("the graph root has no owning actor")
        return obj

    def depth(self) -> int:
        """Nesting distance from the owning actor; 0 for the actor itself."""
        depth = 0
        obj = self
        while obj.parent is not None and obj.parent is not self.graph.root:
            obj = obj.parent
            depth += 1
        return depth

    def _require_box(self) -> Box:
        if self.box is None:
            raise ValueError(f"object {self.abs_id()!r} has not been sized")
        return self.box

    @property
    def top_left(self) -> Point:
        return self._require_box().top_left

    @property
    def width(self) -> float:
        return self._require_box().width

    @property
    def height(self) -> float:
        return self._require_box().height

    def center(self) -> Point:
        return self._require_box().center()

    def bottom(self) -> float:
        return self._require_box().bottom()


@dataclass(slots=True, eq=False)
class Edge:
    src: Object
    dst: Object
    label: Label | None = None
    route: list[Point] = field(default_factory=list)
    # True for the vertical edges the engine synthesizes for each actor
    is_lifeline: bool = False

    def is_self_message(self) -> bool:
        return self.src.actor() is self.dst.actor()


class Graph:
    """Root container: the object tree and the ordered edge list."""

    def __init__(self) -> None:
        self.objects: list[Object] = []
        self.edges: list[Edge] = []
        self.root = Object(id="", graph=self)
        # Clearance kept left and right of the content; set by layout
        self.margin_x: float = 0.0

    def actors(self) -> list[Object]:
        return list(self.root.children)

    def ensure_object(self, abs_id: str) -> Object:
        """Look up or create an object from a dotted path such as ``"a.t1"``."""
        return self.root.ensure_child(abs_id.split("."))

    def add_edge(self, src: Object, dst: Object, label: str | Label | None = None) -> Edge:
        if isinstance(label, str):
            label = Label(text=label)
        edge = Edge(src=src, dst=dst, label=label)
        self.edges.append(edge)
        return edge

    def contains(self, obj: Object) -> bool:
        """Whether ``obj`` is reachable from this graph's root."""
        node: Object | None = obj
        while node is not None:
            if node is self.root:
                return True
            parent = node.parent
            if parent is not None and not any(c is node for c in parent.children):
                return False
            node = parent
        return False

    def bounding_box(self) -> Box | None:
        """Smallest box enclosing every object box and every edge route point.

        Widened by ``margin_x`` on the left and right.
        """
        xs: list[float] = []
        ys: list[float] = []
        for obj in self.objects:
            if obj.box is None:
                continue
            xs.extend((obj.box.top_left.x, obj.box.right()))
            ys.extend((obj.box.top_left.y, obj.box.bottom()))
        for edge in self.edges:
            for p in edge.route:
                xs.append(p.x)
                ys.append(p.y)
        if not xs:
            return None
        min_x = min(xs) - self.margin_x
        max_x = max(xs) + self.margin_x
        min_y = min(ys)
        return Box(
            top_left=Point(x=min_x, y=min_y),
            width=max_x - min_x,
            height=max(ys) - min_y,
        )
