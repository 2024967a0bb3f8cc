from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from .node import Node


class GridStore:
    """Sparse (x, y) -> Node mapping plus a dense list of the live nodes.

    Every live node satisfies ``all_nodes()[node.index] is node``.
    ``all_nodes()`` and iteration expose the live list without copying it;
    callers must not mutate it, and must take a copy before calling
    ``put`` or ``delete`` while iterating.
    """

    def __init__(self) -> None:
        self._cells: Dict[Tuple[int, int], Node] = {}
        self._nodes: List[Node] = []

    def get(self, x: int, y: int) -> Optional[Node]:
        return self._cells.get((x, y))

    def put(self, x: int, y: int, node: Node) -> bool:
        key = (x, y)
        if key in self._cells:
            return False
        node.index = len(self._nodes)
        self._nodes.append(node)
        self._cells[key] = node
        return True

    def delete(self, x: int, y: int) -> Optional[Node]:
        node = self._cells.pop((x, y), None)
        if node is None:
            return None

        last = self._nodes.pop()
        if last is not node:
            self._nodes[node.index] = last
            last.index = node.index
        node.index = -1
        return node

    def all_nodes(self) -> Sequence[Node]:
        return self._nodes

    def is_empty(self) -> bool:
        return not self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, key: object) -> bool:
        return key in self._cells

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)
