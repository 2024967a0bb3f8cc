"""Tests for the Bound tracker."""

import pytest

from untangly.grid_components import Bound, Direction, Node


class TestBoundExpand:
    def test_starts_at_zero(self):
        assert Bound().as_dict() == {"north": 0, "east": 0, "south": 0, "west": 0}

    def test_expand_adds_to_named_bound(self):
        bound = Bound()
        bound.expand(Direction.WEST)
        bound.expand(Direction.NORTH, 2)

        assert bound == Bound(north=2, west=1)

    def test_listener_called_once_per_unit(self):
        calls = []
        bound = Bound(listener=lambda direction, b: calls.append((direction, b.south)))

        bound.expand(Direction.SOUTH, 3)

        assert calls == [
            (Direction.SOUTH, 1),
            (Direction.SOUTH, 2),
            (Direction.SOUTH, 3),
        ]

    @pytest.mark.parametrize("amount", [0, -1, 1.5, True])
    def test_expand_rejects_non_positive_amounts(self, amount):
        bound = Bound()

        with pytest.raises(ValueError):
            bound.expand(Direction.EAST, amount)
        assert bound == Bound()


class TestBoundRecompute:
    def test_recompute_from_nodes(self):
        bound = Bound(north=9, east=9, south=9, west=9)
        nodes = [Node(0, 0), Node(2, 1), Node(-1, -3)]

        bound.recompute_from_nodes(nodes)

        assert bound == Bound(north=1, east=2, south=3, west=1)

    def test_recompute_with_only_positive_quadrant(self):
        bound = Bound(south=4, west=4)

        bound.recompute_from_nodes([Node(1, 0), Node(1, 1)])

        assert bound == Bound(north=1, east=1)

    def test_recompute_empty_is_all_zero(self):
        bound = Bound(north=1, east=1, south=1, west=1)

        bound.recompute_from_nodes([])

        assert bound == Bound()

    def test_recompute_does_not_notify_listener(self):
        calls = []
        bound = Bound(listener=lambda *args: calls.append(args))

        bound.recompute_from_nodes([Node(5, 5)])

        assert calls == []


class TestBoundQueries:
    def test_overflow_reports_excess(self):
        bound = Bound(north=1, east=1, south=1, west=1)

        assert bound.overflow(0, 2) == [(Direction.NORTH, 1)]
        assert bound.overflow(-3, 0) == [(Direction.WEST, 2)]
        assert bound.overflow(1, -1) == []

    def test_contains(self):
        bound = Bound(east=2)

        assert bound.contains(2, 0)
        assert not bound.contains(3, 0)
        assert not bound.contains(0, 1)

    def test_snapshot_is_detached(self):
        calls = []
        bound = Bound(north=1, listener=lambda *args: calls.append(args))
        copy = bound.snapshot()

        bound.expand(Direction.NORTH)

        assert copy.north == 1
        assert copy.listener is None
