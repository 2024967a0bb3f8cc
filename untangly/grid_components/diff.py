from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .model import DiagramModel

Coord = Tuple[int, int]


@dataclass
class DiffResult:
    added: List[Coord]
    removed: List[Coord]
    engaged: List[Coord]
    released: List[Coord]
    changed: List[Tuple[Coord, str, str]]

    def has_changes(self) -> bool:
        return any(
            [
                self.added,
                self.removed,
                self.engaged,
                self.released,
                self.changed,
            ]
        )


def _descriptors(model: DiagramModel) -> Dict[Coord, Optional[str]]:
    return {node.coords: node.descriptor for node in model.nodes()}


def diff(model_a: DiagramModel, model_b: DiagramModel) -> DiffResult:
    cells_a = _descriptors(model_a)
    cells_b = _descriptors(model_b)

    added: List[Coord] = []
    removed: List[Coord] = []
    engaged: List[Coord] = []
    released: List[Coord] = []
    changed: List[Tuple[Coord, str, str]] = []

    for key in sorted(set(cells_a).union(cells_b)):
        if key not in cells_a:
            added.append(key)
            if cells_b[key] is not None:
                engaged.append(key)
            continue
        if key not in cells_b:
            removed.append(key)
            continue

        before, after = cells_a[key], cells_b[key]
        if before is None and after is not None:
            engaged.append(key)
        elif before is not None and after is None:
            released.append(key)
        elif before != after:
            changed.append((key, before, after))

    return DiffResult(
        added=added,
        removed=removed,
        engaged=engaged,
        released=released,
        changed=changed,
    )
