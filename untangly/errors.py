class DiagramError(Exception):
    pass


class ConfigurationError(DiagramError):
    pass


class LayoutOverflowError(DiagramError):
    pass


class InvalidTransitionError(DiagramError):
    pass


class PlacementError(DiagramError):
    pass


class UnknownShapeError(DiagramError):
    pass
