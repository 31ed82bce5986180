"""Tests for the graph model -- object tree, roles and geometry accessors."""
from __future__ import annotations

import pytest

from seqlayout.graph import Graph, Label
from seqlayout.types import Box, Point


class TestBox:
    def test_center_and_bottom(self):
        box = Box(top_left=Point(x=10, y=20), width=100, height=40)
        assert box.center() == Point(x=60, y=40)
        assert box.bottom() == 60
        assert box.right() == 110

    def test_sized_box_sits_at_origin(self):
        box = Box.sized(30, 30)
        assert box.top_left == Point(x=0, y=0)


class TestObjectTree:
    def test_ensure_child_creates_each_link_once(self):
        g = Graph()
        t1 = g.ensure_object("a.t1")
        again = g.ensure_object("a.t1")

        assert t1 is again
        assert [o.abs_id() for o in g.objects] == ["a", "a.t1"]

    def test_objects_keep_creation_order(self):
        g = Graph()
        g.ensure_object("b")
        g.ensure_object("a.t1")
        g.ensure_object("b.t1")
        assert [o.abs_id() for o in g.objects] == ["b", "a", "a.t1", "b.t1"]
        assert [a.id for a in g.actors()] == ["b", "a"]

    def test_new_objects_are_labelled_with_their_id(self):
        g = Graph()
        assert g.ensure_object("alice").label == Label(text="alice")

    def test_actor_role_and_depth(self):
        g = Graph()
        a = g.ensure_object("a")
        t1 = g.ensure_object("a.t1")
        t2 = g.ensure_object("a.t1.t2")

        assert a.is_actor()
        assert not t1.is_actor()
        assert a.depth() == 0
        assert t1.depth() == 1
        assert t2.depth() == 2
        assert t2.actor() is a
        assert a.actor() is a

    def test_root_has_no_actor(self):
        with pytest.raises(ValueError):
            Graph().root.actor()

    def test_unsized_object_has_no_center(self):
        g = Graph()
        with pytest.raises(ValueError):
            g.ensure_object("a").center()

    def test_objects_compare_by_identity(self):
        g1 = Graph()
        g2 = Graph()
        assert g1.ensure_object("a") != g2.ensure_object("a")
        assert len({g1.ensure_object("a"), g2.ensure_object("a")}) == 2

    def test_contains(self):
        g = Graph()
        t = g.ensure_object("a.t")
        assert g.contains(t)
        assert not Graph().contains(t)


class TestEdges:
    def test_add_edge_wraps_string_labels(self):
        g = Graph()
        a = g.ensure_object("a")
        b = g.ensure_object("b")
        edge = g.add_edge(a, b, "hello")

        assert edge.label == Label(text="hello")
        assert edge.route == []
        assert g.edges == [edge]

    def test_self_message_detection_goes_through_spans(self):
        g = Graph()
        a = g.ensure_object("a")
        b = g.ensure_object("b")
        assert g.add_edge(a, g.ensure_object("a.t")).is_self_message()
        assert not g.add_edge(a, b).is_self_message()
