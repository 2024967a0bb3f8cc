from typing import Callable, Dict, Iterable, List, Optional, Tuple

from .core import Direction
from .node import Node

BoundListener = Callable[[Direction, "Bound"], None]


class Bound:

    def __init__(
        self,
        north: int = 0,
        east: int = 0,
        south: int = 0,
        west: int = 0,
        listener: Optional[BoundListener] = None,
    ) -> None:
        self.north = north
        self.east = east
        self.south = south
        self.west = west
        self.listener = listener

    def expand(self, direction: Direction, amount: int = 1) -> None:
        if not isinstance(amount, int) or isinstance(amount, bool) or amount < 1:
            raise ValueError("amount must be a positive integer.")
        for _ in range(amount):
            setattr(self, direction.value, getattr(self, direction.value) + 1)
            if self.listener is not None:
                self.listener(direction, self)

    def recompute_from_nodes(self, nodes: Iterable[Node]) -> None:
        north = east = south = west = 0
        for node in nodes:
            north = max(north, node.y)
            east = max(east, node.x)
            south = max(south, -node.y)
            west = max(west, -node.x)
        self.north, self.east, self.south, self.west = north, east, south, west

    def overflow(self, x: int, y: int) -> List[Tuple[Direction, int]]:
        excess = [
            (Direction.NORTH, y - self.north),
            (Direction.EAST, x - self.east),
            (Direction.SOUTH, -y - self.south),
            (Direction.WEST, -x - self.west),
        ]
        return [(direction, amount) for direction, amount in excess if amount > 0]

    def contains(self, x: int, y: int) -> bool:
        return not self.overflow(x, y)

    def snapshot(self) -> "Bound":
        return Bound(self.north, self.east, self.south, self.west)

    def as_dict(self) -> Dict[str, int]:
        return {
            "north": self.north,
            "east": self.east,
            "south": self.south,
            "west": self.west,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bound):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __repr__(self) -> str:
        return (
            f"Bound(north={self.north}, east={self.east}, "
            f"south={self.south}, west={self.west})"
        )
