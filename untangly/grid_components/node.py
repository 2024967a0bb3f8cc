from typing import Optional, Tuple

from .core import NodeState
from ..errors import InvalidTransitionError


class Node:
    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y
        self.index = -1
        self.state = NodeState.SINGLE
        self.descriptor: Optional[str] = None

    @property
    def coords(self) -> Tuple[int, int]:
        return self.x, self.y

    @property
    def is_single(self) -> bool:
        return self.state is NodeState.SINGLE

    @property
    def is_engaged(self) -> bool:
        return self.state is NodeState.ENGAGED

    def engage(self, descriptor: str) -> None:
        if self.is_engaged:
            raise InvalidTransitionError(
                f"Node at ({self.x}, {self.y}) is already engaged."
            )
        if not isinstance(descriptor, str) or not descriptor:
            raise InvalidTransitionError("descriptor must be a non-empty string.")
        self.state = NodeState.ENGAGED
        self.descriptor = descriptor

    def __repr__(self) -> str:
        if self.is_engaged:
            return f"Node(x={self.x}, y={self.y}, engaged={self.descriptor!r})"
        return f"Node(x={self.x}, y={self.y}, single)"
