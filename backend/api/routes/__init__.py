"""API route modules."""

from .health import router as health_router
from .items import router as items_router

__all__ = [
    "health_router",
    "items_router",
]
