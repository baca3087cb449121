"""
FastAPI Application Entry Point

This module creates and configures the FastAPI application.

Key Concepts:
=============

1. Application Factory Pattern
   - create_app() function returns configured app
   - Each app owns its own VideoStore (tests pass their own)

2. Lifespan Events
   - startup: log configuration and store size
   - shutdown: log shutdown

3. Middleware Stack
   - CORS: Allow cross-origin requests

4. Exception Handlers
   - Log unhandled errors and standardize the error format
   - GraphQL errors never reach these handlers: Strawberry reports
     them in the response's "errors" list
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from videos_api import __version__
from videos_api.config import get_settings
from videos_api.graphql import basic_schema, create_graphql_router, schema
from videos_api.services.store import VideoStore

# =============================================================================
# Logging Configuration
# =============================================================================
settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# =============================================================================
# Lifespan Events
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Code before yield: Runs on startup
    Code after yield: Runs on shutdown
    """
    # ----- STARTUP -----
    logger.info(f"Starting {settings.app_name}...")
    logger.info(f"Debug mode: {settings.debug}")
    logger.info(f"Video store holds {len(app.state.store)} videos")

    yield  # Application runs here

    # ----- SHUTDOWN -----
    logger.info(f"Shutting down {settings.app_name}...")


# =============================================================================
# Application Factory
# =============================================================================
def create_app(store: VideoStore | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store: Video store to serve (a store with the default videos
            is created when omitted)

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.app_name,
        description="""
## Videos API

A GraphQL API over a list of videos.

### Endpoints
- **/graphql**: Relay-compliant schema (global IDs, node interface, connections)
- **/graphql/basic**: Plain schema with list fields
        """,
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # The store lives as long as the app; resolvers get it through the
    # GraphQL context.
    app.state.store = store if store is not None else VideoStore()

    # -------------------------------------------------------------------------
    # CORS Middleware
    # -------------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------
    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Catch-all exception handler.

        In production, hide internal errors from users.
        In debug mode, show more details.
        """
        logger.error(f"Unhandled error: {exc}", exc_info=True)

        if settings.debug:
            return JSONResponse(
                status_code=500,
                content={"detail": str(exc)},
            )

        return JSONResponse(
            status_code=500,
            content={"detail": "An internal error occurred."},
        )

    # -------------------------------------------------------------------------
    # GraphQL Endpoints
    # -------------------------------------------------------------------------
    basic_router = create_graphql_router(
        basic_schema,
        playground_enabled=settings.graphql_playground_enabled,
    )
    app.include_router(basic_router, prefix="/graphql/basic", tags=["GraphQL"])

    graphql_router = create_graphql_router(
        schema,
        playground_enabled=settings.graphql_playground_enabled,
    )
    app.include_router(graphql_router, prefix="/graphql", tags=["GraphQL"])

    # -------------------------------------------------------------------------
    # Health Check Endpoint
    # -------------------------------------------------------------------------
    @app.get(
        "/health",
        tags=["Health"],
        summary="Health check",
        description="Check if the API is running and healthy.",
    )
    async def health_check(request: Request) -> dict:
        """Health check endpoint with store and GraphQL status."""
        return {
            "status": "healthy",
            "app": settings.app_name,
            "version": settings.api_version,
            "videos": len(request.app.state.store),
            "graphql": {
                "endpoint": "/graphql",
                "basic_endpoint": "/graphql/basic",
                "playground_enabled": settings.graphql_playground_enabled,
            },
        }

    @app.get(
        "/",
        tags=["Root"],
        summary="API root",
        description="Welcome message and API information.",
    )
    async def root() -> dict:
        """Root endpoint with API information."""
        return {
            "message": f"Welcome to {settings.app_name}",
            "version": settings.api_version,
            "docs": "/docs",
            "graphql": "/graphql",
            "health": "/health",
        }

    return app


# =============================================================================
# Application Instance
# =============================================================================
# This is what uvicorn imports: uvicorn videos_api.main:app

app = create_app()


# =============================================================================
# Development Server
# =============================================================================
# This allows running the app directly with: python -m videos_api.main

if __name__ == "__main__":
    import uvicorn

    logger.info(f"Listening on http://localhost:{settings.port}")
    uvicorn.run(
        "videos_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
