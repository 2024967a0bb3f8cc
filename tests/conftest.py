"""Shared fixtures for the untangly test suite."""

from typing import List, Tuple

import pytest

from untangly.grid_components import DiagramModel


class RecordingRenderer:
    """Renderer that records every notification in order."""

    def __init__(self) -> None:
        self.events: List[Tuple] = []

    def on_bound_expanded(self, direction, bound):
        self.events.append(("expanded", direction, bound.as_dict()))

    def on_bounds_recomputed(self, bound):
        self.events.append(("recomputed", bound.as_dict()))

    def on_node_created(self, node, position):
        self.events.append(("created", node.coords, position))

    def on_node_engaged(self, node, descriptor, position):
        self.events.append(("engaged", node.coords, descriptor, position))

    def on_node_removed(self, node):
        self.events.append(("removed", node.coords))

    def kinds(self, kind: str) -> List[Tuple]:
        return [event for event in self.events if event[0] == kind]


@pytest.fixture
def recorder():
    return RecordingRenderer()


@pytest.fixture
def model(recorder):
    diagram = DiagramModel(renderer=recorder)
    diagram.start()
    return diagram


def assert_index_integrity(model: DiagramModel) -> None:
    nodes = model.nodes()
    for position, node in enumerate(nodes):
        assert node.index == position
        assert model.get(node.x, node.y) is node
    assert len(nodes) == len(model.grid)


def true_extent(model: DiagramModel) -> dict:
    nodes = model.nodes()
    return {
        "north": max([0] + [n.y for n in nodes]),
        "east": max([0] + [n.x for n in nodes]),
        "south": max([0] + [-n.y for n in nodes]),
        "west": max([0] + [-n.x for n in nodes]),
    }
