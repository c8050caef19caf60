"""Persistence layer: backend interface, implementations and selection."""

import logging

from .base import ItemBackend
from .file_store import FileBackend

logger = logging.getLogger(__name__)


def get_backend(settings) -> ItemBackend:
    """Build the durable backend named by POTLUCK_STORAGE. Called once at startup."""
    if settings.POTLUCK_STORAGE == "mongo":
        from .mongo_store import MongoBackend

        if not settings.MONGO_URL:
            raise ValueError("MONGO_URL is required when POTLUCK_STORAGE=mongo")
        return MongoBackend.from_url(
            settings.MONGO_URL,
            settings.MONGO_DB,
            settings.MONGO_COLLECTION,
            transactional=settings.MONGO_TRANSACTIONS,
        )
    logger.info("Using items file %s", settings.items_file)
    return FileBackend(settings.items_file)


__all__ = ["ItemBackend", "FileBackend", "get_backend"]
