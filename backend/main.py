"""
Potluck Backend API
Sign-up list for a potluck: who brings which dish to which section.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.routes import health_router, items_router
from config import Settings, get_settings
from middleware import (
    global_exception_handler,
    http_exception_handler,
    log_requests,
    request_validation_handler,
)
from repositories import get_backend
from store import ItemStore

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, store: Optional[ItemStore] = None) -> FastAPI:
    """Build the app. Settings and backend are fixed for the app's lifetime."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    if store is None:
        store = ItemStore(get_backend(settings))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        store.load_all()
        logger.info("%s ready (%s storage, %d items)", settings.APP_TITLE, settings.POTLUCK_STORAGE, len(store))
        yield
        store.backend.close()

    app = FastAPI(title=settings.APP_TITLE, version=settings.APP_VERSION, lifespan=lifespan)
    app.state.settings = settings
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials="*" not in settings.ALLOWED_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(log_requests)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    app.include_router(health_router)
    app.include_router(items_router)
    return app


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.HOST, port=settings.PORT)
