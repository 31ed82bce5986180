from __future__ import annotations

from dataclasses import dataclass

# ============================================================================
# Geometry primitives -- plain value types shared by the graph and the engine
# ============================================================================


@dataclass(slots=True)
class Point:
    x: float
    y: float


@dataclass(slots=True)
class Box:
    """Axis-aligned rectangle anchored at its top-left corner."""
    top_left: Point
    width: float
    height: float

    @classmethod
    def sized(cls, width: float, height: float) -> Box:
        """A box of the given size at the origin, for pre-sized actors."""
        return cls(top_left=Point(x=0, y=0), width=width, height=height)

    def center(self) -> Point:
        return Point(
            x=self.top_left.x + self.width / 2,
            y=self.top_left.y + self.height / 2,
        )

    def bottom(self) -> float:
        return self.top_left.y + self.height

    def right(self) -> float:
        return self.top_left.x + self.width


# ============================================================================
# Layout options -- user-facing configuration
#
# Every field is optional; None falls back to the matching constant in
# seqlayout.sequence.constants.
# ============================================================================

@dataclass(slots=True)
class LayoutOptions:
    horizontal_pad: float | None = None
    min_actor_distance: float | None = None
    min_edge_distance: float | None = None
    activation_box_width: float | None = None
    activation_box_depth_grow_factor: float | None = None
    default_activation_box_height: float | None = None
    self_message_horizontal_travel: float | None = None
