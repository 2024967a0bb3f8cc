from typing import Protocol, TYPE_CHECKING

from .core import Direction, Point

if TYPE_CHECKING:
    from .bound import Bound
    from .node import Node


class Renderer(Protocol):
    """Outbound notifications issued synchronously while the model mutates."""

    def on_bound_expanded(self, direction: Direction, bound: "Bound") -> None: ...

    def on_bounds_recomputed(self, bound: "Bound") -> None: ...

    def on_node_created(self, node: "Node", position: Point) -> None: ...

    def on_node_engaged(self, node: "Node", descriptor: str, position: Point) -> None: ...

    def on_node_removed(self, node: "Node") -> None: ...


class NullRenderer:

    def on_bound_expanded(self, direction: Direction, bound: "Bound") -> None:
        pass

    def on_bounds_recomputed(self, bound: "Bound") -> None:
        pass

    def on_node_created(self, node: "Node", position: Point) -> None:
        pass

    def on_node_engaged(self, node: "Node", descriptor: str, position: Point) -> None:
        pass

    def on_node_removed(self, node: "Node") -> None:
        pass
