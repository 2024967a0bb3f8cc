"""Tests for GridStore and Node."""

import pytest

from untangly.errors import InvalidTransitionError
from untangly.grid_components import GridStore, Node, NodeState


class TestNode:
    """Node state and the single -> engaged transition."""

    def test_new_node_is_single(self):
        node = Node(1, 2)

        assert node.coords == (1, 2)
        assert node.state is NodeState.SINGLE
        assert node.descriptor is None
        assert node.is_single and not node.is_engaged

    def test_engage_sets_descriptor(self):
        node = Node(0, 0)
        node.engage("M 0 0 L 1 1")

        assert node.is_engaged
        assert node.descriptor == "M 0 0 L 1 1"

    def test_engage_twice_is_rejected(self):
        node = Node(0, 0)
        node.engage("first")

        with pytest.raises(InvalidTransitionError):
            node.engage("second")
        assert node.descriptor == "first"

    @pytest.mark.parametrize("descriptor", ["", None, 42])
    def test_engage_requires_non_empty_string(self, descriptor):
        node = Node(0, 0)

        with pytest.raises(InvalidTransitionError):
            node.engage(descriptor)
        assert node.is_single


class TestGridStore:
    """Sparse lookup plus dense swap-removal list."""

    def test_get_missing_coordinate_returns_none(self):
        grid = GridStore()

        assert grid.get(0, 0) is None
        assert grid.get(-1000, 1000) is None

    def test_put_assigns_sequential_indexes(self):
        grid = GridStore()
        nodes = [Node(0, 0), Node(0, 1), Node(-1, 0)]
        for node in nodes:
            assert grid.put(node.x, node.y, node) is True

        assert [n.index for n in nodes] == [0, 1, 2]
        assert list(grid.all_nodes()) == nodes
        assert len(grid) == 3
        assert (-1, 0) in grid

    def test_put_on_occupied_coordinate_is_noop(self):
        grid = GridStore()
        original = Node(0, 0)
        original.engage("shape")
        grid.put(0, 0, original)

        assert grid.put(0, 0, Node(0, 0)) is False
        assert grid.get(0, 0) is original
        assert original.descriptor == "shape"
        assert len(grid) == 1

    def test_delete_swaps_last_into_hole(self):
        grid = GridStore()
        a, b, c = Node(0, 0), Node(1, 0), Node(2, 0)
        for node in (a, b, c):
            grid.put(node.x, node.y, node)

        removed = grid.delete(0, 0)

        assert removed is a
        assert list(grid.all_nodes()) == [c, b]
        assert c.index == 0
        assert b.index == 1
        assert grid.get(0, 0) is None

    def test_delete_last_element(self):
        grid = GridStore()
        a, b = Node(0, 0), Node(1, 0)
        grid.put(0, 0, a)
        grid.put(1, 0, b)

        grid.delete(1, 0)

        assert list(grid.all_nodes()) == [a]
        assert a.index == 0

    def test_delete_missing_is_noop(self):
        grid = GridStore()
        grid.put(0, 0, Node(0, 0))

        assert grid.delete(5, 5) is None
        assert len(grid) == 1

    def test_delete_until_empty(self):
        grid = GridStore()
        grid.put(0, 0, Node(0, 0))
        grid.delete(0, 0)

        assert grid.is_empty()
        assert len(grid.all_nodes()) == 0

    def test_all_nodes_is_a_live_view(self):
        grid = GridStore()
        a, b = Node(0, 0), Node(1, 0)
        grid.put(0, 0, a)
        view = grid.all_nodes()

        grid.put(1, 0, b)
        assert list(view) == [a, b]

        grid.delete(0, 0)
        assert list(view) == [b]
        assert view is grid.all_nodes()

    def test_index_integrity_after_mixed_operations(self):
        grid = GridStore()
        for x in range(-3, 4):
            for y in range(-2, 3):
                grid.put(x, y, Node(x, y))
        for x, y in [(0, 0), (3, 2), (-3, -2), (1, 1), (3, -2)]:
            grid.delete(x, y)
        grid.put(0, 0, Node(0, 0))

        for position, node in enumerate(grid.all_nodes()):
            assert node.index == position
            assert grid.get(node.x, node.y) is node
