import logging
from typing import Optional, Union

from ..errors import ConfigurationError, DiagramError
from .model import ChangeSet, DiagramModel
from .shapes import Shape, ShapeCatalog

logger = logging.getLogger(__name__)


class FlowchartController:
    """Entry point for UI requests.

    Requests that break a precondition are rejected without touching the
    model: the reason is logged and ``None`` is returned.
    """

    def __init__(self, model: DiagramModel, catalog: Optional[ShapeCatalog] = None) -> None:
        if not isinstance(model, DiagramModel):
            raise ConfigurationError("model must be a DiagramModel instance.")
        if catalog is not None and not isinstance(catalog, ShapeCatalog):
            raise ConfigurationError("catalog must be a ShapeCatalog instance.")
        self.model = model
        self.catalog = catalog

    def _resolve_descriptor(self, target: Union[str, Shape]) -> str:
        if isinstance(target, Shape):
            return target.path
        if isinstance(target, str) and self.catalog is not None and target in self.catalog:
            return self.catalog.get(target).path
        return target

    def request_engage(self, x: int, y: int, target: Union[str, Shape]) -> Optional[ChangeSet]:
        try:
            changes = self.model.engage(x, y, self._resolve_descriptor(target))
        except DiagramError as exc:
            logger.warning("Engage request at (%s, %s) rejected: %s", x, y, exc)
            return None
        logger.debug("Engage request at (%s, %s) created %d nodes", x, y, len(changes.created))
        return changes

    def request_remove(self, x: int, y: int) -> Optional[ChangeSet]:
        try:
            changes = self.model.remove(x, y)
        except DiagramError as exc:
            logger.warning("Remove request at (%s, %s) rejected: %s", x, y, exc)
            return None
        logger.debug("Remove request at (%s, %s) removed %d nodes", x, y, len(changes.removed))
        return changes
