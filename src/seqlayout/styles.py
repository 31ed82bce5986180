from __future__ import annotations

import math

from .graph import Label

# ============================================================================
# Font metrics -- character width estimates used to size unsized labels.
#
# The renderer owns real text measurement; these numbers only give actors
# without an explicit box a plausible default before layout.
# ============================================================================


def estimate_text_width(text: str, font_size: float, font_weight: int) -> float:
    """Average character width in px at the given font size and weight (proportional font)."""
    if font_weight >= 600:
        width_ratio = 0.58
    elif font_weight >= 500:
        width_ratio = 0.55
    else:
        width_ratio = 0.52
    return len(text) * font_size * width_ratio


# Fixed font sizes (px)
FONT_SIZES = {
    "actor_label": 13,
    "message_label": 11,
}

# Font weights per element type
FONT_WEIGHTS = {
    "actor_label": 500,
    "message_label": 400,
}

# Line height as a multiple of the font size
LINE_HEIGHT = 1.4

ACTOR_PADDING = {
    "horizontal": 16,
    "vertical": 10,
}


def label_dimensions(label: Label | None, kind: str) -> tuple[float, float]:
    """Width and height of a label, estimated from its text when not measured.

    ``kind`` selects the font: "actor_label" or "message_label".
    """
    if label is None:
        return 0.0, 0.0
    size = FONT_SIZES[kind]
    width = label.width
    if not _measured(width):
        width = estimate_text_width(label.text, size, FONT_WEIGHTS[kind])
    height = label.height
    if not _measured(height):
        height = size * LINE_HEIGHT if label.text else 0.0
    return float(width), float(height)


def _measured(size: float | None) -> bool:
    return size is not None and math.isfinite(size) and size >= 0
