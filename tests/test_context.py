"""Tests for the layout context -- logging sink and cancellation."""
from __future__ import annotations

import logging

import pytest

from seqlayout import Box, Graph, LayoutCancelledError, LayoutContext, layout


def two_actor_graph() -> Graph:
    g = Graph()
    a = g.ensure_object("a")
    a.box = Box.sized(50, 50)
    b = g.ensure_object("b")
    g.add_edge(a, b)
    return g


class TestLayoutContext:
    def test_background_context_is_not_cancelled(self):
        ctx = LayoutContext.background()
        assert not ctx.cancelled
        ctx.check("anything")

    def test_cancel_raises_on_next_check(self):
        ctx = LayoutContext()
        ctx.cancel()
        assert ctx.cancelled
        with pytest.raises(LayoutCancelledError, match="routing"):
            ctx.check("routing")

    def test_with_logger_shares_cancellation(self):
        ctx = LayoutContext()
        child = ctx.with_logger(logging.getLogger("seqlayout.test"))
        ctx.cancel()
        assert child.cancelled
        assert child.logger.name == "seqlayout.test"

    def test_layout_logs_through_the_context_logger(self, caplog):
        caplog.set_level(logging.DEBUG, logger="seqlayout")
        layout(LayoutContext(), two_actor_graph())

        assert "_init: 2 actors, 0 spans, 1 messages" in caplog.text
        assert "_add_lifelines: 2 lifelines" in caplog.text

    def test_custom_logger_receives_diagnostics(self, caplog):
        custom = logging.getLogger("diagram.pipeline")
        caplog.set_level(logging.DEBUG, logger="diagram.pipeline")
        layout(LayoutContext(logger=custom), two_actor_graph())

        records = [r for r in caplog.records if r.name == "diagram.pipeline"]
        assert any("_place_actors" in r.getMessage() for r in records)

    def test_cancellation_is_logged(self, caplog):
        caplog.set_level(logging.INFO, logger="seqlayout")
        ctx = LayoutContext()
        ctx.cancel()
        with pytest.raises(LayoutCancelledError):
            layout(ctx, two_actor_graph())
        assert "layout cancelled during init" in caplog.text
