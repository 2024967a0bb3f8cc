from typing import Dict, List, Optional, Tuple, Union

from rich.console import Console
from wcwidth import wcwidth

from ..errors import ConfigurationError
from .bound import Bound
from .canvas import Canvas
from .core import BoxChars, Direction, NodeState, Point
from .grid_layout import CellLayout
from .node import Node
from .shapes import ShapeCatalog


class AsciiRenderer:
    """Draws the node grid as text.

    Only the coordinates, states and labels it is notified about are kept;
    screen positions are recomputed from the latest bound on every render,
    so bound changes reposition every cell at once.
    """

    def __init__(
        self,
        layout: Optional[CellLayout] = None,
        *,
        box_style: Optional[Union[str, BoxChars]] = None,
        catalog: Optional[ShapeCatalog] = None,
        engaged_style: Optional[str] = "bold cyan",
        single_style: Optional[str] = "dim",
    ) -> None:
        if layout is not None and not isinstance(layout, CellLayout):
            raise ConfigurationError("layout must be a CellLayout instance.")
        if catalog is not None and not isinstance(catalog, ShapeCatalog):
            raise ConfigurationError("catalog must be a ShapeCatalog instance.")

        if isinstance(box_style, BoxChars):
            self.chars = box_style
        else:
            style_key = box_style or "rounded"
            if not isinstance(style_key, str):
                raise ConfigurationError("box_style must be a string or BoxChars instance.")
            try:
                self.chars = BoxChars.for_style(style_key)
            except ValueError as exc:
                raise ConfigurationError(str(exc)) from exc

        self.layout = layout or CellLayout()
        self.catalog = catalog
        self.engaged_style = engaged_style
        self.single_style = single_style
        self.bound = Bound()
        self.cells: Dict[Tuple[int, int], Tuple[NodeState, Optional[str]]] = {}

    def on_bound_expanded(self, direction: Direction, bound: Bound) -> None:
        self.bound = bound.snapshot()

    def on_bounds_recomputed(self, bound: Bound) -> None:
        self.bound = bound.snapshot()

    def on_node_created(self, node: Node, position: Point) -> None:
        self.cells[node.coords] = (NodeState.SINGLE, None)

    def on_node_engaged(self, node: Node, descriptor: str, position: Point) -> None:
        self.cells[node.coords] = (NodeState.ENGAGED, self._label_for(descriptor))

    def on_node_removed(self, node: Node) -> None:
        self.cells.pop(node.coords, None)

    def _label_for(self, descriptor: str) -> str:
        if self.catalog is not None:
            shape = self.catalog.find_by_path(descriptor)
            if shape is not None:
                return shape.name
        return descriptor

    def position(self, x: int, y: int) -> Point:
        return self.layout.position(x, y, self.bound)

    def render(self, include_markup: bool = False) -> str:
        if not self.cells:
            return ""

        width, height = self.layout.extent(self.bound)
        canvas = Canvas(width=width, height=height)
        for (x, y), (state, label) in sorted(self.cells.items()):
            origin = self.position(x, y)
            if state is NodeState.ENGAGED:
                self._draw_box(canvas, origin, label or "")
            else:
                self._draw_attachment(canvas, origin)
        return canvas.render(include_markup=include_markup)

    def show(self, console: Optional[Console] = None) -> None:
        console = console or Console()
        console.print(self.render(include_markup=True), highlight=False)

    def _put(self, canvas: Canvas, x: int, y: int, char: str, style: Optional[str], width: int = 1) -> None:
        canvas.set(x, y, char, width=width)
        if char != " ":
            canvas.style(x, y, style)

    def _draw_attachment(self, canvas: Canvas, origin: Point) -> None:
        x = origin.px + self.layout.cell_width // 2
        y = origin.py + self.layout.cell_height // 2
        self._put(canvas, x, y, self.chars.attachment, self.single_style)

    def _draw_box(self, canvas: Canvas, origin: Point, label: str) -> None:
        x, y = origin
        w = self.layout.cell_width
        h = self.layout.cell_height
        style = self.engaged_style
        bottom_y = y + h - 1

        self._put(canvas, x, y, self.chars.top_left, style)
        self._put(canvas, x + w - 1, y, self.chars.top_right, style)
        self._put(canvas, x, bottom_y, self.chars.bottom_left, style)
        self._put(canvas, x + w - 1, bottom_y, self.chars.bottom_right, style)
        for i in range(1, w - 1):
            self._put(canvas, x + i, y, self.chars.horizontal, style)
            self._put(canvas, x + i, bottom_y, self.chars.horizontal, style)
        for line_y in range(y + 1, bottom_y):
            self._put(canvas, x, line_y, self.chars.vertical, style)
            self._put(canvas, x + w - 1, line_y, self.chars.vertical, style)

        glyphs = self._fit_label(label, max(w - 4, 1))
        display_width = sum(width for _, width in glyphs)
        cursor = x + 1 + max((w - 2 - display_width) // 2, 0)
        label_y = y + h // 2
        for char, width in glyphs:
            self._put(canvas, cursor, label_y, char, None, width=width)
            cursor += width

    def _fit_label(self, label: str, limit: int) -> List[Tuple[str, int]]:
        glyphs = [(char, max(wcwidth(char), 1)) for char in label if char not in "\r\n"]
        if sum(width for _, width in glyphs) <= limit:
            return glyphs

        fitted: List[Tuple[str, int]] = []
        used = 0
        ellipsis_width = max(wcwidth(self.chars.ellipsis), 1)
        for char, width in glyphs:
            if used + width + ellipsis_width > limit:
                break
            fitted.append((char, width))
            used += width
        fitted.append((self.chars.ellipsis, ellipsis_width))
        return fitted
