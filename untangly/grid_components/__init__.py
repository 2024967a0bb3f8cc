from .core import CARDINALS, BoxChars, Direction, NodeState, Point
from .node import Node
from .grid import GridStore
from .bound import Bound
from .grid_layout import CellLayout
from .renderer import NullRenderer, Renderer
from .model import ChangeSet, CleanupPolicy, DiagramModel
from .shapes import Shape, ShapeCatalog, default_catalog
from .canvas import Canvas
from .ascii_renderer import AsciiRenderer
from .controller import FlowchartController
from .diff import diff, DiffResult

__all__ = [
    "CARDINALS",
    "BoxChars",
    "Direction",
    "NodeState",
    "Point",
    "Node",
    "GridStore",
    "Bound",
    "CellLayout",
    "Renderer",
    "NullRenderer",
    "ChangeSet",
    "CleanupPolicy",
    "DiagramModel",
    "Shape",
    "ShapeCatalog",
    "default_catalog",
    "Canvas",
    "AsciiRenderer",
    "FlowchartController",
    "diff",
    "DiffResult",
]
