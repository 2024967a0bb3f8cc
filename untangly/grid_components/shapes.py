from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional

from ..errors import ConfigurationError, UnknownShapeError


@dataclass(frozen=True)
class Shape:
    """A flowchart outline.

    ``preview`` is drawn in the picker, ``path`` on the diagram itself. Both
    are opaque outline strings; the path becomes the engaged node's
    descriptor.
    """

    name: str
    preview: str
    path: str


class ShapeCatalog:

    def __init__(self, shapes: Optional[Iterable[Shape]] = None) -> None:
        self._shapes: Dict[str, Shape] = {}
        for shape in shapes or ():
            self.add(shape)

    def add(self, shape: Shape) -> Shape:
        if not isinstance(shape, Shape):
            raise ConfigurationError("shape must be a Shape instance.")
        if not shape.name or not shape.path:
            raise ConfigurationError("shape requires a name and a path.")
        if shape.name in self._shapes:
            raise ConfigurationError(f"Shape '{shape.name}' is already registered.")
        self._shapes[shape.name] = shape
        return shape

    def get(self, name: str) -> Shape:
        try:
            return self._shapes[name]
        except KeyError:
            raise UnknownShapeError(f"Unknown shape: {name}") from None

    def find_by_path(self, path: str) -> Optional[Shape]:
        for shape in self._shapes.values():
            if shape.path == path:
                return shape
        return None

    def names(self) -> List[str]:
        return list(self._shapes)

    def __contains__(self, name: object) -> bool:
        return name in self._shapes

    def __len__(self) -> int:
        return len(self._shapes)

    def __iter__(self) -> Iterator[Shape]:
        return iter(list(self._shapes.values()))


def default_catalog() -> ShapeCatalog:
    return ShapeCatalog(
        [
            Shape(
                "process",
                "M 5 9 L 29 9 L 29 25 L 5 25 Z",
                "M 9 24 L 80 24 L 80 65 L 9 65 Z",
            ),
            Shape(
                "decision",
                "M 17 5 L 29 17 L 17 29 L 5 17 Z",
                "M 44.5 9 L 80 44.5 L 44.5 80 L 9 44.5 Z",
            ),
            Shape(
                "terminator",
                "M 11 10 L 23 10 A 7 7 0 0 1 23 24 L 11 24 A 7 7 0 0 1 11 10 Z",
                "M 27 24 L 62 24 A 20.5 20.5 0 0 1 62 65 L 27 65 A 20.5 20.5 0 0 1 27 24 Z",
            ),
            Shape(
                "data",
                "M 9 9 L 31 9 L 25 25 L 3 25 Z",
                "M 20 24 L 84 24 L 69 65 L 5 65 Z",
            ),
        ]
    )
