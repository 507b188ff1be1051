import logging
from logging import Logger

from .config import settings


def setup_logging() -> None:
    """
    Configure root logging based on settings.logging.

    - Sets root level according to settings.logging.level
    - Applies the format from settings.logging.format
    - Leaves existing handlers alone, so calling it twice is harmless
    """
    level_name = (settings.logging.level or "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)

    root = logging.getLogger()
    if root.handlers:
        root.setLevel(level)
        return

    logging.basicConfig(
        level=level,
        format=settings.logging.format,
    )

    for noisy in ("uvicorn.access", "sqlalchemy.engine", "aiosqlite"):
        logging.getLogger(noisy).setLevel(logging.INFO)


__all__ = ["setup_logging", "Logger"]
