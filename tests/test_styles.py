"""Tests for label measurement -- text width estimates and measured sizes."""
from __future__ import annotations

import pytest

from seqlayout.graph import Label
from seqlayout.styles import FONT_SIZES, estimate_text_width, label_dimensions


# ============================================================================
# Text measurement
# ============================================================================


class TestEstimateTextWidth:
    def test_scales_with_length(self):
        short = estimate_text_width("ab", 13, 500)
        long = estimate_text_width("abcd", 13, 500)
        assert long == pytest.approx(short * 2)

    def test_bold_text_is_wider(self):
        assert estimate_text_width("abc", 13, 600) > estimate_text_width("abc", 13, 400)


class TestLabelDimensions:
    def test_missing_label_is_empty(self):
        assert label_dimensions(None, "actor_label") == (0.0, 0.0)
        assert label_dimensions(Label(text=""), "message_label") == (0.0, 0.0)

    def test_measured_sizes_win(self):
        assert label_dimensions(Label(text="abc", width=7, height=3), "actor_label") == (7.0, 3.0)

    def test_estimates_unmeasured_sizes(self):
        width, height = label_dimensions(Label(text="abc"), "message_label")
        assert width == pytest.approx(estimate_text_width("abc", FONT_SIZES["message_label"], 400))
        assert height > FONT_SIZES["message_label"]

    def test_measured_sizes_count_without_text(self):
        assert label_dimensions(Label(text="", width=400, height=20), "message_label") == (400.0, 20.0)

    def test_non_finite_sizes_fall_back_to_estimates(self):
        width, height = label_dimensions(
            Label(text="abc", width=float("inf"), height=float("nan")), "message_label"
        )
        assert width == pytest.approx(estimate_text_width("abc", FONT_SIZES["message_label"], 400))
        assert height > FONT_SIZES["message_label"]

    def test_negative_sizes_fall_back_to_estimates(self):
        width, _ = label_dimensions(Label(text="", width=-5), "actor_label")
        assert width == 0.0
