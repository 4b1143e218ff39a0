# api/core/exception_handlers.py
import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from analysis.exceptions import AnalysisError

logger = logging.getLogger("api.errors")


async def analysis_exception_handler(request: Request, exc: AnalysisError) -> JSONResponse:
    """
    Maps rejected analysis input (e.g. malformed word timings in strict mode)
    to a 422 response.
    """
    logger.warning(
        f"Analysis rejected for request: {request.method} {request.url.path}: {exc.message}",
        extra={"path": str(request.url.path), "method": request.method},
    )
    return JSONResponse(
        status_code=422,
        content={
            "error": type(exc).__name__,
            "detail": exc.message,
        }
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Global exception handler to catch unhandled exceptions.

    This ensures that any unexpected error returns a standardized 500
    response and is logged with a traceback.
    """
    logger.error(
        f"Unhandled exception for request: {request.method} {request.url.path}",
        exc_info=True,  # This adds the full traceback to the log
        extra={
            "path": str(request.url.path),
            "method": request.method,
            "error": str(exc)
        }
    )
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal Server Error",
            "detail": "An unexpected error occurred on the server."
        }
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Adds custom exception handlers to the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """
    app.add_exception_handler(AnalysisError, analysis_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
