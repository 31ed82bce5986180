from __future__ import annotations

from dataclasses import dataclass, fields

from ..types import LayoutOptions

# ============================================================================
# Sequence layout constants
# ============================================================================

# Clearance reserved left and right of each actor when spacing them out
HORIZONTAL_PAD = 50.0

# Minimum distance between two adjacent actor centers
MIN_ACTOR_DISTANCE = 200.0

# Minimum vertical distance between two messages
MIN_EDGE_DISTANCE = 100.0

# Width of an activation box directly on a lifeline
ACTIVATION_BOX_WIDTH = 20.0

# Each nesting level makes an activation box this much wider
ACTIVATION_BOX_DEPTH_GROW_FACTOR = 10.0

# Height of an activation box that spans a single message
DEFAULT_ACTIVATION_BOX_HEIGHT = MIN_EDGE_DISTANCE / 2

# How far a self-message loops out to the right of its lifeline
SELF_MESSAGE_HORIZONTAL_TRAVEL = 100.0

# Fallback header size for actors with no usable box
MIN_ACTOR_WIDTH = 80.0
MIN_ACTOR_HEIGHT = 40.0


@dataclass(frozen=True, slots=True)
class LayoutConfig:
    """Resolved constants for a single layout call."""
    horizontal_pad: float = HORIZONTAL_PAD
    min_actor_distance: float = MIN_ACTOR_DISTANCE
    min_edge_distance: float = MIN_EDGE_DISTANCE
    activation_box_width: float = ACTIVATION_BOX_WIDTH
    activation_box_depth_grow_factor: float = ACTIVATION_BOX_DEPTH_GROW_FACTOR
    default_activation_box_height: float = DEFAULT_ACTIVATION_BOX_HEIGHT
    self_message_horizontal_travel: float = SELF_MESSAGE_HORIZONTAL_TRAVEL


# The grow factor may be zero (all depths share one width); the rest must be positive
_NON_NEGATIVE = {"activation_box_depth_grow_factor", "horizontal_pad"}


def resolve_config(options: LayoutOptions | None = None) -> LayoutConfig:
    """Merge user options over the module defaults and validate the result."""
    if options is None:
        return LayoutConfig()

    overrides: dict[str, float] = {}
    for f in fields(LayoutConfig):
        value = getattr(options, f.name)
        if value is None:
            continue
        value = float(value)
        if value != value or value in (float("inf"), float("-inf")):
            raise ValueError(f"{f.name} must be finite, got {value}")
        if f.name in _NON_NEGATIVE:
            if value < 0:
                raise ValueError(f"{f.name} must be >= 0, got {value}")
        elif value <= 0:
            raise ValueError(f"{f.name} must be > 0, got {value}")
        overrides[f.name] = value

    # The single-message box height follows the edge distance unless set explicitly
    if (
        "min_edge_distance" in overrides
        and "default_activation_box_height" not in overrides
    ):
        overrides["default_activation_box_height"] = overrides["min_edge_distance"] / 2

    return LayoutConfig(**overrides)
