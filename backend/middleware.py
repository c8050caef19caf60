"""Request logging and JSON error envelopes."""

import logging
import time
from typing import Callable

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


async def log_requests(request: Request, call_next: Callable):
    start_time = time.time()
    request_id = f"{int(start_time * 1000)}-{id(request)}"

    try:
        response = await call_next(request)
        process_time = time.time() - start_time
        # Only log slow requests (>1s) or errors
        if process_time > 1.0 or response.status_code >= 400:
            logger.info(
                "[%s] %s %s - %s - %.2fs",
                request_id, request.method, request.url.path, response.status_code, process_time,
            )
        else:
            logger.debug(
                "[%s] %s %s - %s", request_id, request.method, request.url.path, response.status_code,
            )
        return response
    except Exception as e:
        process_time = time.time() - start_time
        logger.error(
            "[%s] %s %s - ERROR: %s - %.2fs",
            request_id, request.method, request.url.path, e, process_time,
        )
        raise


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.info("Rejected body for %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": "Invalid JSON body"})


async def global_exception_handler(request: Request, exc: Exception):
    logger.error(
        "Unhandled exception in %s %s: %s", request.method, request.url.path, exc, exc_info=True,
    )
    return JSONResponse(status_code=500, content={"error": "Internal server error"})
