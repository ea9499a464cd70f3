"""
API Server Module

This module contains the demo FastAPI application.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import logging

from fee_engine.api.core.api_config import APIConfig, api_config
from fee_engine.api.core.api_middleware import setup_middleware
from fee_engine.api.models.response_models import ErrorResponse
from fee_engine.api.routes import fee_routes, health_routes
from fee_engine.fees.fee_errors import FeeError

logger = logging.getLogger(__name__)

async def fee_error_handler(request: Request, exc: FeeError) -> JSONResponse:
    """Turn fee validation failures into 422 responses."""
    logger.info(f"Rejected fee input on {request.url.path}: {exc.error_code.value}")
    body = ErrorResponse(
        error="Invalid fee input",
        error_code=exc.error_code.value,
        detail=str(exc)
    )
    return JSONResponse(status_code=422, content=body.model_dump(mode="json"))

def create_app(config: APIConfig = api_config) -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title=config.title,
        version=config.version,
        description=config.description,
        debug=config.debug
    )

    setup_middleware(app, config)

    app.add_exception_handler(FeeError, fee_error_handler)

    app.include_router(
        health_routes.router,
        tags=["health"]
    )

    app.include_router(
        fee_routes.router,
        prefix="/api/v1",
        tags=["fees"]
    )

    logger.debug(f"{config.title} v{config.version} created (debug={config.debug})")

    return app

# Create the app instance
app = create_app()

if __name__ == "__main__":
    import uvicorn

    from fee_engine.config import settings
    from fee_engine.config.logging_config import setup_logging

    setup_logging(settings.LOG_LEVEL, settings.LOG_DIR)
    logger.info(f"Starting {api_config.title} on {api_config.host}:{api_config.port}")

    uvicorn.run(
        "fee_engine.api.core.api_server:app",
        host=api_config.host,
        port=api_config.port,
        reload=api_config.debug
    )
