import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple, Union

from ..errors import ConfigurationError, InvalidTransitionError, PlacementError
from .bound import Bound
from .core import CARDINALS, Direction, Point
from .grid import GridStore
from .grid_layout import CellLayout
from .node import Node
from .renderer import NullRenderer, Renderer

logger = logging.getLogger(__name__)


class CleanupPolicy(Enum):

    LOOKAHEAD = "lookahead"
    DIRECT = "direct"


@dataclass
class ChangeSet:
    created: List[Node] = field(default_factory=list)
    engaged: Optional[Node] = None
    removed: List[Node] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not (self.created or self.engaged or self.removed)


class DiagramModel:

    def __init__(
        self,
        renderer: Optional[Renderer] = None,
        layout: Optional[CellLayout] = None,
        cleanup_policy: Union[CleanupPolicy, str] = CleanupPolicy.LOOKAHEAD,
    ) -> None:
        if layout is not None and not isinstance(layout, CellLayout):
            raise ConfigurationError("layout must be a CellLayout instance.")
        try:
            self.cleanup_policy = CleanupPolicy(cleanup_policy)
        except ValueError as exc:
            raise ConfigurationError(f"Unknown cleanup policy: {cleanup_policy!r}") from exc

        self.renderer: Renderer = renderer if renderer is not None else NullRenderer()
        self.layout = layout or CellLayout()
        self.grid = GridStore()
        self.bound = Bound(listener=self._bound_expanded)

    def _bound_expanded(self, direction: Direction, bound: Bound) -> None:
        logger.debug("Bound expanded %s to %r", direction.value, bound)
        self.renderer.on_bound_expanded(direction, bound)

    def get(self, x: int, y: int) -> Optional[Node]:
        return self.grid.get(x, y)

    def nodes(self) -> Sequence[Node]:
        return self.grid.all_nodes()

    def position(self, node: Node) -> Point:
        return self.layout.position(node.x, node.y, self.bound)

    def positions(self) -> Dict[Tuple[int, int], Point]:
        return {node.coords: self.position(node) for node in self.grid.all_nodes()}

    def start(self) -> ChangeSet:
        changes = ChangeSet()
        if self.grid.is_empty():
            changes.created.append(self._create(0, 0))
        return changes

    def create(self, x: int, y: int) -> Optional[Node]:
        _check_coords(x, y)
        if (x, y) in self.grid:
            return None
        if self.grid.is_empty():
            if (x, y) != (0, 0):
                raise PlacementError("The first node of a diagram must be at the origin.")
        elif not any(self.grid.get(*direction.step(x, y)) for direction in CARDINALS):
            raise PlacementError(
                f"({x}, {y}) is not adjacent to any node in the diagram."
            )
        return self._create(x, y)

    def _create(self, x: int, y: int) -> Optional[Node]:
        node = Node(x, y)
        if not self.grid.put(x, y, node):
            return None

        # Placement depends on the bound, so it must be widened first.
        for direction, excess in self.bound.overflow(x, y):
            self.bound.expand(direction, excess)

        logger.debug("Created single node at (%d, %d)", x, y)
        self.renderer.on_node_created(node, self.position(node))
        return node

    def engage(self, x: int, y: int, descriptor: str) -> ChangeSet:
        _check_coords(x, y)
        node = self.grid.get(x, y)
        if node is None:
            raise InvalidTransitionError(f"No node exists at ({x}, {y}).")
        node.engage(descriptor)

        changes = ChangeSet(engaged=node)
        for direction in CARDINALS:
            created = self._create(*direction.step(x, y))
            if created is not None:
                changes.created.append(created)

        logger.debug(
            "Engaged node at (%d, %d), %d attachment points created",
            x,
            y,
            len(changes.created),
        )
        self.renderer.on_node_engaged(node, descriptor, self.position(node))
        return changes

    def remove(self, x: int, y: int) -> ChangeSet:
        _check_coords(x, y)
        node = self.grid.get(x, y)
        if node is None:
            raise InvalidTransitionError(f"No node exists at ({x}, {y}).")
        if not node.is_engaged:
            raise InvalidTransitionError(
                f"Node at ({x}, {y}) is single, only engaged nodes can be removed."
            )

        dead, single_neighbours = self._collect_dead(node)

        changes = ChangeSet()
        for victim in dead:
            self.grid.delete(victim.x, victim.y)
            self.renderer.on_node_removed(victim)
            changes.removed.append(victim)

        # The old bound still covers (x, y), so recreating here never expands it.
        if single_neighbours < 4 or self.grid.is_empty():
            replacement = self._create(x, y)
            if replacement is not None:
                changes.created.append(replacement)

        self.bound.recompute_from_nodes(self.grid.all_nodes())
        self.renderer.on_bounds_recomputed(self.bound)

        logger.debug(
            "Removed engaged node at (%d, %d) with %d orphans, bound now %r",
            x,
            y,
            len(dead) - 1,
            self.bound,
        )
        return changes

    def _collect_dead(self, node: Node) -> Tuple[List[Node], int]:
        x, y = node.coords
        dead: List[Node] = []
        single_neighbours = 0

        for direction in CARDINALS:
            neighbour = self.grid.get(*direction.step(x, y))
            if neighbour is None or neighbour.is_engaged:
                continue
            single_neighbours += 1
            if self.cleanup_policy is CleanupPolicy.LOOKAHEAD and self._is_gateway(
                x, y, direction
            ):
                continue
            dead.append(neighbour)

        dead.append(node)
        return dead, single_neighbours

    def _is_gateway(self, x: int, y: int, direction: Direction) -> bool:
        if self._is_engaged_at(*direction.step(x, y, 2)):
            return True
        return any(self._is_engaged_at(dx, dy) for dx, dy in direction.diagonals(x, y))

    def _is_engaged_at(self, x: int, y: int) -> bool:
        node = self.grid.get(x, y)
        return node is not None and node.is_engaged

    def __len__(self) -> int:
        return len(self.grid)


def _check_coords(x: int, y: int) -> None:
    for value in (x, y):
        if not isinstance(value, int) or isinstance(value, bool):
            raise PlacementError("grid coordinates must be integers.")
