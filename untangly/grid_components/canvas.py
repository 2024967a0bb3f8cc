from typing import Dict, List, Optional, Tuple

from rich.markup import escape

from ..errors import LayoutOverflowError


class Canvas:

    def __init__(self, width: int, height: int):
        if width < 1 or height < 1:
            raise LayoutOverflowError("Canvas needs at least one row and one column.")
        self.width = width
        self.height = height
        self.rows = [[" "] * width for _ in range(height)]
        # 0 marks the trailing half of a wide glyph.
        self.cell_widths = [[1] * width for _ in range(height)]
        self.styles: Dict[Tuple[int, int], str] = {}

    def _check(self, x: int, y: int) -> None:
        if not (0 <= y < self.height and 0 <= x < self.width):
            raise LayoutOverflowError(
                f"Diagram content exceeds canvas bounds at ({x}, {y}) "
                f"on a {self.width}x{self.height} canvas."
            )

    def set(self, x: int, y: int, char: str, width: int = 1) -> None:
        width = max(width, 1)
        for xi in range(x, x + width):
            self._check(xi, y)

        if self.cell_widths[y][x] == 0 and x > 0:
            # Overwriting the tail of a wide glyph blanks its head.
            self.rows[y][x - 1] = " "
            self.cell_widths[y][x - 1] = 1
        for xi in range(x + 1, min(x + self.cell_widths[y][x], self.width)):
            self.rows[y][xi] = " "
            self.cell_widths[y][xi] = 1

        self.rows[y][x] = char
        self.cell_widths[y][x] = width
        self.styles.pop((x, y), None)
        for xi in range(x + 1, x + width):
            self.rows[y][xi] = " "
            self.cell_widths[y][xi] = 0
            self.styles.pop((xi, y), None)

    def get(self, x: int, y: int) -> str:
        if 0 <= y < self.height and 0 <= x < self.width:
            if self.cell_widths[y][x] == 0:
                return " "
            return self.rows[y][x]
        return " "

    def style(self, x: int, y: int, style: Optional[str]) -> None:
        self._check(x, y)
        if style:
            self.styles[(x, y)] = style

    def render(self, include_markup: bool = False) -> str:
        lines: List[str] = []
        for y in range(self.height):
            runs: List[Tuple[Optional[str], List[str]]] = []
            for x in range(self.width):
                if self.cell_widths[y][x] == 0:
                    continue
                style = self.styles.get((x, y)) if include_markup else None
                if runs and runs[-1][0] == style:
                    runs[-1][1].append(self.rows[y][x])
                else:
                    runs.append((style, [self.rows[y][x]]))

            parts: List[str] = []
            for style, chars in runs:
                text = "".join(chars)
                if not include_markup:
                    parts.append(text)
                elif style:
                    parts.append(f"[{style}]{escape(text)}[/{style}]")
                else:
                    parts.append(escape(text))
            lines.append("".join(parts).rstrip())
        return "\n".join(lines)
