from .grid_components import (
    AsciiRenderer,
    Bound,
    BoxChars,
    CellLayout,
    ChangeSet,
    CleanupPolicy,
    DiagramModel,
    Direction,
    FlowchartController,
    Node,
    NodeState,
    Shape,
    ShapeCatalog,
    default_catalog,
)

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
]
