"""
API Middleware Module

Request timing, unhandled-error responses and CORS for the demo API.
"""

import time
import logging
from fastapi import Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from fee_engine.api.models.response_models import ErrorResponse
from fee_engine.core.response_models import ErrorCode

logger = logging.getLogger(__name__)

class LoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status and duration; sets X-Process-Time."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start_time = time.time()

        response = await call_next(request)

        process_time = time.time() - start_time
        logger.info(f"{request.method} {request.url.path} - {response.status_code} - {process_time:.4f}s")
        response.headers["X-Process-Time"] = str(process_time)

        return response

class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """
    Turns any exception that escapes the routes into a 500 ErrorResponse.

    The exception is logged with its traceback; the client only sees the
    error code and a generic message.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        try:
            return await call_next(request)
        except Exception as e:
            logger.error(f"Unhandled error on {request.method} {request.url.path}: {type(e).__name__}", exc_info=True)
            body = ErrorResponse(
                error="Internal server error",
                error_code=ErrorCode.UNKNOWN_ERROR.value
            )
            return JSONResponse(status_code=500, content=body.model_dump(mode="json"))

def setup_cors_middleware(app, config):
    """Setup CORS middleware with configuration."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.allowed_origins,
        allow_credentials=config.allowed_credentials,
        allow_methods=config.allowed_methods,
        allow_headers=config.allowed_headers,
    )

def setup_middleware(app, config):
    """Setup all middleware for the API; the last one added runs outermost."""
    setup_cors_middleware(app, config)
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(ErrorHandlingMiddleware)
