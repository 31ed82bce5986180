from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass, field

from ..context import LayoutContext
from ..errors import InvalidGraphError
from ..graph import Edge, Graph, Object
from ..styles import ACTOR_PADDING, label_dimensions
from ..types import Box, LayoutOptions, Point
from .constants import MIN_ACTOR_HEIGHT, MIN_ACTOR_WIDTH, LayoutConfig, resolve_config

# ============================================================================
# Sequence diagram layout engine
#
# Mutates a compiled Graph in place. Actors are the root's direct children,
# activation spans are anything nested below them, and edges are messages in
# the order they were declared.
#
# Layout strategy:
#   1. Size unsized actors, collect spans with their depth, rank messages
#   2. Space actors horizontally in declaration order
#   3. Align actor headers on a common bottom baseline
#   4. Stack messages vertically, one row per message
#   5. Append a lifeline edge below every actor
#   6. Size activation spans from the rows of the messages they touch
# ============================================================================


@dataclass(slots=True)
class _SequenceState:
    graph: Graph
    config: LayoutConfig
    actors: list[Object]
    messages: list[Edge]
    # (span, depth) pairs, parents always before their children
    spans: list[tuple[Object, int]] = field(default_factory=list)
    # First/last message rank touching a span or any span nested in it
    min_rank: dict[Object, int] = field(default_factory=dict)
    max_rank: dict[Object, int] = field(default_factory=dict)
    actor_x_step: float = 0.0
    edge_y_step: float = 0.0
    # Common bottom Y of every actor header
    baseline: float = 0.0
    # Synthesized lifeline edges, in actor order
    lifelines: list[Edge] = field(default_factory=list)

    def edge_y(self, rank: int) -> float:
        return self.baseline + (rank + 1) * self.edge_y_step


def layout_sequence_diagram(
    ctx: LayoutContext | None,
    graph: Graph,
    options: LayoutOptions | None = None,
) -> None:
    """Lay out a sequence diagram graph in place.

    Sets every actor and span box, routes every message, and appends one
    lifeline edge per actor after the original edges.
    """
    if ctx is None:
        ctx = LayoutContext.background()
    config = resolve_config(options)

    # Lifelines from an earlier run are engine output, not input
    graph.edges[:] = [e for e in graph.edges if not e.is_lifeline]

    _validate(graph)
    actors = graph.actors()
    if not actors:
        ctx.logger.debug("layout_sequence_diagram: no actors, nothing to do")
        return

    state = _SequenceState(
        graph=graph,
        config=config,
        actors=actors,
        messages=list(graph.edges),
    )

    ctx.check("init")
    _init(ctx, state)
    ctx.check("actor placement")
    _place_actors(ctx, state)
    ctx.check("header alignment")
    _align_headers(ctx, state)
    ctx.check("message routing")
    _route_messages(ctx, state)
    ctx.check("lifeline synthesis")
    _add_lifelines(ctx, state)
    ctx.check("activation sizing")
    _place_spans(ctx, state)


def _validate(graph: Graph) -> None:
    for obj in graph.objects:
        if not graph.contains(obj):
            raise InvalidGraphError(f"object {obj.abs_id()!r} is not attached to the graph")
    for i, edge in enumerate(graph.edges):
        for end in (edge.src, edge.dst):
            if end is graph.root or end.graph is not graph or not graph.contains(end):
                raise InvalidGraphError(
                    f"edge[{i}] endpoint {end.abs_id()!r} is not an object of this graph"
                )


# ============================================================================
# 1. Initialization
# ============================================================================


def _init(ctx: LayoutContext, state: _SequenceState) -> None:
    config = state.config

    for actor in state.actors:
        _ensure_actor_box(ctx, actor)

        # Breadth-first so a span is always visited after its parent
        queue: deque[tuple[Object, int]] = deque((child, 1) for child in actor.children)
        while queue:
            span, depth = queue.popleft()
            state.spans.append((span, depth))
            queue.extend((child, depth + 1) for child in span.children)

    state.actor_x_step = config.min_actor_distance
    state.edge_y_step = config.min_edge_distance
    for rank, edge in enumerate(state.messages):
        label_w, label_h = label_dimensions(edge.label, "message_label")
        state.actor_x_step = max(state.actor_x_step, label_w + config.horizontal_pad)
        state.edge_y_step = max(state.edge_y_step, label_h + config.horizontal_pad)
        _mark_rank(state, edge.src, rank)
        _mark_rank(state, edge.dst, rank)

    ctx.logger.debug(
        "_init: %d actors, %d spans, %d messages, actor_x_step=%s edge_y_step=%s",
        len(state.actors),
        len(state.spans),
        len(state.messages),
        state.actor_x_step,
        state.edge_y_step,
    )


def _ensure_actor_box(ctx: LayoutContext, actor: Object) -> None:
    """Give an actor a usable header box, derived from its label if needed."""
    box = actor.box
    if box is not None and _usable(box.width) and _usable(box.height):
        return

    label_w, label_h = label_dimensions(actor.label, "actor_label")
    width = max(math.ceil(label_w) + ACTOR_PADDING["horizontal"] * 2, MIN_ACTOR_WIDTH)
    height = max(math.ceil(label_h) + ACTOR_PADDING["vertical"] * 2, MIN_ACTOR_HEIGHT)
    if box is not None:
        # Keep whichever dimension was usable
        if _usable(box.width):
            width = box.width
        if _usable(box.height):
            height = box.height
    ctx.logger.debug(
        "_ensure_actor_box: %r sized to %sx%s", actor.abs_id(), width, height
    )
    actor.box = Box.sized(width, height)


def _usable(size: float) -> bool:
    return math.isfinite(size) and size > 0


def _mark_rank(state: _SequenceState, endpoint: Object, rank: int) -> None:
    """Record ``rank`` on a message endpoint span and every enclosing span."""
    obj = endpoint
    while not obj.is_actor():
        if obj not in state.min_rank or rank < state.min_rank[obj]:
            state.min_rank[obj] = rank
        if obj not in state.max_rank or rank > state.max_rank[obj]:
            state.max_rank[obj] = rank
        if obj.parent is None:
            raise InvalidGraphError(f"object {obj.abs_id()!r} has no owning actor")
        obj = obj.parent


# ============================================================================
# 2-3. Actors
# ============================================================================


def _place_actors(ctx: LayoutContext, state: _SequenceState) -> None:
    pad = state.config.horizontal_pad
    state.graph.margin_x = pad
    prev: Object | None = None
    for actor in state.actors:
        width = actor.width
        if prev is None:
            center_x = pad + width / 2
        else:
            gap = max(state.actor_x_step, (prev.width + width) / 2 + pad)
            center_x = prev.center().x + gap
        # Fresh point: callers may share one Box instance between actors
        actor.box = Box(
            top_left=Point(x=center_x - width / 2, y=0),
            width=width,
            height=actor.height,
        )
        prev = actor

    ctx.logger.debug(
        "_place_actors: centers=%s", [a.center().x for a in state.actors]
    )


def _align_headers(ctx: LayoutContext, state: _SequenceState) -> None:
    # The tallest header starts at y=0; every other one hangs down to meet it
    state.baseline = max(actor.height for actor in state.actors)
    for actor in state.actors:
        actor.top_left.y = state.baseline - actor.height
    ctx.logger.debug("_align_headers: baseline=%s", state.baseline)


# ============================================================================
# 4-5. Edges
# ============================================================================


def _route_messages(ctx: LayoutContext, state: _SequenceState) -> None:
    for rank, edge in enumerate(state.messages):
        if rank % 64 == 0:
            ctx.check("message routing")
        y = state.edge_y(rank)
        src_x = edge.src.actor().center().x
        dst_x = edge.dst.actor().center().x

        if edge.is_self_message():
            # Loop out to the right and come back half a row lower
            travel = state.config.self_message_horizontal_travel
            loop_y = y + state.edge_y_step / 2
            edge.route = [
                Point(x=src_x, y=y),
                Point(x=src_x + travel, y=y),
                Point(x=src_x + travel, y=loop_y),
                Point(x=dst_x, y=loop_y),
            ]
        else:
            edge.route = [Point(x=src_x, y=y), Point(x=dst_x, y=y)]

    ctx.logger.debug("_route_messages: routed %d messages", len(state.messages))


def _add_lifelines(ctx: LayoutContext, state: _SequenceState) -> None:
    end_y = state.edge_y(len(state.messages))
    for actor in state.actors:
        x = actor.center().x
        lifeline = Edge(
            src=actor,
            dst=actor,
            route=[Point(x=x, y=actor.bottom()), Point(x=x, y=end_y)],
            is_lifeline=True,
        )
        state.graph.edges.append(lifeline)
        state.lifelines.append(lifeline)
    ctx.logger.debug(
        "_add_lifelines: %d lifelines ending at y=%s", len(state.actors), end_y
    )


# ============================================================================
# 6. Activation spans
# ============================================================================


def _place_spans(ctx: LayoutContext, state: _SequenceState) -> None:
    config = state.config
    half = config.default_activation_box_height / 2
    lowest = 0.0

    for span, depth in state.spans:
        width = config.activation_box_width + depth * config.activation_box_depth_grow_factor
        center_x = span.actor().center().x
        parent = span.parent

        if span in state.min_rank:
            top_y = state.edge_y(state.min_rank[span]) - half
            bottom_y = state.edge_y(state.max_rank[span]) + half
        elif parent is not None and not parent.is_actor():
            # No messages anywhere below it: cover the enclosing span
            if parent.box is None:
                raise RuntimeError(f"span {parent.abs_id()!r} was not sized before its children")
            top_y = parent.box.top_left.y
            bottom_y = parent.box.bottom()
        else:
            top_y = state.edge_y(0) - half
            bottom_y = state.edge_y(0) + half

        span.box = Box(
            top_left=Point(x=center_x - width / 2, y=top_y),
            width=width,
            height=bottom_y - top_y,
        )
        lowest = max(lowest, bottom_y)

    # Lifelines always reach past the lowest activation box
    for lifeline in state.lifelines:
        end = lifeline.route[-1]
        if end.y < lowest:
            end.y = lowest

    ctx.logger.debug("_place_spans: sized %d spans, lowest bottom y=%s", len(state.spans), lowest)
