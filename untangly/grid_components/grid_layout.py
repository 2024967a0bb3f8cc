from typing import Tuple, TYPE_CHECKING

from .core import Point
from ..errors import ConfigurationError

if TYPE_CHECKING:
    from .bound import Bound


class CellLayout:

    def __init__(
        self,
        cell_width: int = 13,
        cell_height: int = 3,
        *,
        horizontal_spacing: int = 2,
        vertical_spacing: int = 1,
    ) -> None:
        for name, value in (
            ("cell_width", cell_width),
            ("cell_height", cell_height),
            ("horizontal_spacing", horizontal_spacing),
            ("vertical_spacing", vertical_spacing),
        ):
            if not isinstance(value, int) or isinstance(value, bool):
                raise ConfigurationError(f"{name} must be an integer.")

        if cell_width < 3 or cell_height < 3:
            raise ConfigurationError("cells must be at least 3x3 characters.")
        if horizontal_spacing < 0 or vertical_spacing < 0:
            raise ConfigurationError("spacing must not be negative.")

        self.cell_width = cell_width
        self.cell_height = cell_height
        self.h_spacing = horizontal_spacing
        self.v_spacing = vertical_spacing

    @property
    def pitch(self) -> Tuple[int, int]:
        return self.cell_width + self.h_spacing, self.cell_height + self.v_spacing

    def position(self, x: int, y: int, bound: "Bound") -> Point:
        pitch_x, pitch_y = self.pitch
        return Point((x + bound.west) * pitch_x, (bound.north - y) * pitch_y)

    def extent(self, bound: "Bound") -> Tuple[int, int]:
        columns = bound.west + bound.east + 1
        rows = bound.north + bound.south + 1
        pitch_x, pitch_y = self.pitch
        return (
            columns * pitch_x - self.h_spacing,
            rows * pitch_y - self.v_spacing,
        )
