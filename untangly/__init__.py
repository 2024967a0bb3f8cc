from .flowchart import *
from .errors import *
from .logging_config import setup_logging

__version__ = "0.1.0"
__all__ = [
    "DiagramModel",
    "FlowchartController",
    "ChangeSet",
    "CleanupPolicy",
    "Node",
    "NodeState",
    "Direction",
    "Bound",
    "CellLayout",
    "BoxChars",
    "Shape",
    "ShapeCatalog",
    "default_catalog",
    "AsciiRenderer",
    "setup_logging",
    "DiagramError",
    "ConfigurationError",
    "LayoutOverflowError",
    "InvalidTransitionError",
    "PlacementError",
    "UnknownShapeError",
]
