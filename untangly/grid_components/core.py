from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Tuple


class Direction(Enum):

    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"

    @property
    def offset(self) -> Tuple[int, int]:
        return _OFFSETS[self]

    @property
    def flanks(self) -> Tuple["Direction", "Direction"]:
        if self in (Direction.NORTH, Direction.SOUTH):
            return Direction.WEST, Direction.EAST
        return Direction.NORTH, Direction.SOUTH

    def step(self, x: int, y: int, distance: int = 1) -> Tuple[int, int]:
        dx, dy = self.offset
        return x + dx * distance, y + dy * distance

    def diagonals(self, x: int, y: int) -> Tuple[Tuple[int, int], Tuple[int, int]]:
        ahead_x, ahead_y = self.step(x, y)
        return tuple(side.step(ahead_x, ahead_y) for side in self.flanks)


_OFFSETS = {
    Direction.NORTH: (0, 1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, -1),
    Direction.WEST: (-1, 0),
}

# Fan-out and inspection order.
CARDINALS: Tuple[Direction, ...] = (
    Direction.NORTH,
    Direction.EAST,
    Direction.SOUTH,
    Direction.WEST,
)


class NodeState(Enum):

    SINGLE = "single"
    ENGAGED = "engaged"


class Point(NamedTuple):
    px: int
    py: int


@dataclass
class BoxChars:

    top_left: str = "╭"
    top_right: str = "╮"
    bottom_left: str = "╰"
    bottom_right: str = "╯"

    horizontal: str = "─"
    vertical: str = "│"

    attachment: str = "┼"
    ellipsis: str = "…"

    @classmethod
    def for_style(cls, style: str) -> "BoxChars":
        key = style.lower().strip()
        if key in {"rounded", "round", "modern"}:
            return cls()
        if key in {"square", "line", "box"}:
            return cls(
                top_left="┌",
                top_right="┐",
                bottom_left="└",
                bottom_right="┘",
            )
        if key in {"ascii", "plain"}:
            return cls(
                top_left="+",
                top_right="+",
                bottom_left="+",
                bottom_right="+",
                horizontal="-",
                vertical="|",
                attachment="+",
                ellipsis="~",
            )
        raise ValueError(f"Unknown box style: {style}")
