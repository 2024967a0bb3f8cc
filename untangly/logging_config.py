import logging
from typing import Optional

from rich.logging import RichHandler


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """Configure the ``untangly`` logger.

    Console output goes through rich; ``log_file`` adds a plain-text copy.
    Calling this again replaces the handlers instead of stacking them.
    """
    logger = logging.getLogger("untangly")
    logger.setLevel(level)

    if logger.hasHandlers():
        logger.handlers.clear()

    console_handler = RichHandler(level=level, show_path=False, rich_tracebacks=True)
    console_handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%H:%M:%S",
            )
        )
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
    return logger
