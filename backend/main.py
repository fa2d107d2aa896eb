"""
Chat Relay API
FastAPI application relaying chat messages to an OpenAI-compatible
completion API over REST and GraphQL.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.api.endpoints.graphql_api import build_graphql_router
from src.api.routers import api_router
from src.config.settings import Settings, get_settings
from src.middleware.cors import CORSHeadersMiddleware
from src.middleware.error_handling import ErrorHandlingMiddleware, http_exception_handler
from src.middleware.request_logging import RequestLoggingMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan context manager."""
    settings: Settings = app.state.settings
    logger.info(f"Starting {settings.app_name} ({settings.environment})")

    if not settings.has_api_key:
        logger.error("OpenAI configuration missing! Check OPENAI_API_KEY")
    else:
        logger.info(f"Relaying chat requests to model {settings.openai_model}")

    yield

    logger.info("Shutting down...")


def configure_logging(settings: Settings) -> None:
    """Configure root logging from settings."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure FastAPI application."""
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        description="Relays chat messages to an OpenAI-compatible completion API",
        version="1.0.0",
        lifespan=lifespan,
        redirect_slashes=False,
        debug=settings.debug,
    )
    app.state.settings = settings

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    # Middleware added last is outermost; CORS must wrap error handling.
    app.add_middleware(ErrorHandlingMiddleware)
    if settings.enable_request_logging:
        app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CORSHeadersMiddleware, headers=settings.cors_headers)

    app.include_router(api_router)
    app.include_router(build_graphql_router(settings), tags=["graphql"])

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=True
    )
