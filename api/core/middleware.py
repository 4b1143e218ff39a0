# api/core/middleware.py
import logging
import os
import time
from typing import Callable
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from config import AppSettings

logger = logging.getLogger("api.middleware")

REQUEST_ID_HEADER = "X-Request-ID"


async def log_requests_middleware(request: Request, call_next: Callable) -> Response:
    """
    Log each analysis request with a request id and its processing time.

    A client-supplied ``X-Request-ID`` is reused so the front-end can correlate
    a recording with its report; otherwise a random id is generated. Both the
    id and ``X-Process-Time-ms`` are echoed on the response.
    """
    request_id = request.headers.get(REQUEST_ID_HEADER) or os.urandom(8).hex()
    started = time.perf_counter()

    logger.info(
        f"Request started: {request.method} {request.url.path}",
        extra={"request_id": request_id, "method": request.method, "path": str(request.url.path)}
    )

    response = await call_next(request)

    elapsed_ms = (time.perf_counter() - started) * 1000
    response.headers["X-Process-Time-ms"] = f"{elapsed_ms:.2f}"
    response.headers[REQUEST_ID_HEADER] = request_id

    logger.info(
        f"Request completed: {request.method} {request.url.path} {response.status_code}",
        extra={
            "request_id": request_id,
            "status_code": response.status_code,
            "process_time_ms": round(elapsed_ms, 2)
        }
    )
    return response


def setup_middleware(app: FastAPI, settings: AppSettings) -> None:
    """
    Adds CORS for the recording front-end and request logging.

    Args:
        app: The FastAPI application instance.
        settings: The application settings object.
    """
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER, "X-Process-Time-ms"],
    )

    app.middleware("http")(log_requests_middleware)
