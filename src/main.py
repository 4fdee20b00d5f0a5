"""Main FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse
from slowapi.middleware import SlowAPIMiddleware

from api.exception_handlers import setup_exception_handlers
from api.middleware.logging import RequestLoggingMiddleware
from api.middleware.request_id import RequestIDMiddleware
from api.middleware.security import SecurityHeadersMiddleware
from api.routes.health import router as health_router
from api.v1 import router as v1_router
from core.config import settings
from core.logging import setup_logging
from core.rate_limit import limiter
from infrastructure.memory.todo_repo import InMemoryTodoRepository

logger = structlog.get_logger()

# Initialize structured logging
setup_logging()

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Log where the service can be reached once it is up."""
    base_url = f"http://localhost:{settings.port}"
    logger.info(
        "server_started",
        environment=settings.app_env,
        url=base_url,
        health_url=f"{base_url}/api",
        api_url=f"{base_url}{settings.api_prefix}/todo",
    )
    yield
    logger.info("server_stopped", todo_count=len(app.state.todo_repository))

def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Each application owns a fresh in-memory todo store for its lifetime.
    """
    app = FastAPI(
        lifespan=lifespan,
        default_response_class=ORJSONResponse,
        title=settings.app_name,
        description=(
            "## Todo API\n\n"
            "A small CRUD service for short textual tasks.\n\n"
            "### Responses\n"
            "- Success: `{success: true, data | message}`\n"
            "- Failure: `{success: false, status, message, errors?}`\n"
            "- Lookups of a todo that does not exist succeed without `data`."
        ),
        version="1.0.0",
        openapi_tags=[
            {
                "name": "health",
                "description": "Health check endpoints",
            },
            {
                "name": "todos",
                "description": "Todo management operations",
            },
        ],
    )

    app.state.todo_repository = InMemoryTodoRepository()

    # Rate limiting
    app.state.limiter = limiter
    app.add_middleware(SlowAPIMiddleware)

    # Security & tracking middleware (LIFO order - last added = outermost)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # GZip compression for responses > 1KB
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Setup exception handlers
    setup_exception_handlers(app)

    # Include routers
    app.include_router(health_router)
    app.include_router(v1_router, prefix=settings.api_prefix)

    return app

app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=not settings.is_production,
    )
