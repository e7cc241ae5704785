# middleware.py
import logging
import os

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

DEFAULT_CORS_ORIGINS = "http://localhost:5173,http://localhost:3000"


def add_cors_middleware(app):
    origins = [
        origin.strip()
        for origin in os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS).split(",")
        if origin.strip()
    ]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


async def error_middleware(request: Request, call_next):
    """
    Single top-level catch. Anything a handler did not turn into an explicit
    response becomes a 500 carrying the exception message.
    """
    try:
        return await call_next(request)
    except Exception as e:
        logger.exception(
            f"Database error: {e}",
            extra={"method": request.method, "path": request.url.path, "status_code": 500},
        )
        return JSONResponse(
            status_code=500,
            content={"error": str(e) or "Unknown error"},
        )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # Unmatched methods are reported the same way as unmatched paths
    if exc.status_code == 405:
        return JSONResponse(status_code=404, content={"error": "Not Found"})
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else first.get("msg")
    else:
        message = "Invalid request"
    logger.warning(f"Rejected {request.method} {request.url.path}: {message}")
    return JSONResponse(status_code=400, content={"error": message})


def add_error_handling(app):
    app.middleware("http")(error_middleware)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
