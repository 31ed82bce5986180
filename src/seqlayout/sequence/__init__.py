from __future__ import annotations

from .constants import (
    HORIZONTAL_PAD,
    MIN_ACTOR_DISTANCE,
    MIN_EDGE_DISTANCE,
    ACTIVATION_BOX_WIDTH,
    ACTIVATION_BOX_DEPTH_GROW_FACTOR,
    DEFAULT_ACTIVATION_BOX_HEIGHT,
    SELF_MESSAGE_HORIZONTAL_TRAVEL,
    LayoutConfig,
    resolve_config,
)
from .layout import layout_sequence_diagram

__all__ = [
    "HORIZONTAL_PAD",
    "MIN_ACTOR_DISTANCE",
    "MIN_EDGE_DISTANCE",
    "ACTIVATION_BOX_WIDTH",
    "ACTIVATION_BOX_DEPTH_GROW_FACTOR",
    "DEFAULT_ACTIVATION_BOX_HEIGHT",
    "SELF_MESSAGE_HORIZONTAL_TRAVEL",
    "LayoutConfig",
    "resolve_config",
    "layout_sequence_diagram",
]
