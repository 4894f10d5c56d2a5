"""Main FastAPI application entry point.

Wires settings, structured logging, request tracing, CORS, RFC 9457
exception handlers and the v1 routers into one application.

Run:
    uvicorn src.main:app --host 0.0.0.0 --port 8080
    wallet-api              # serve() with settings.host / settings.port
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.core.config import settings
from src.core.container import get_database, get_logger
from src.presentation.routers.api.middleware.trace_middleware import TraceMiddleware
from src.presentation.routers.api.v1 import v1_router
from src.presentation.routers.api.v1.errors import register_exception_handlers
from src.presentation.routers.system import system_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan.

    - Startup: create missing tables in development, log the environment
    - Shutdown: dispose the connection pool
    """
    logger = get_logger()
    database = get_database()

    if settings.is_development:
        await database.create_all()

    logger.info(
        "application_started",
        environment=settings.environment.value,
        version=settings.app_version,
    )

    yield

    await database.close()
    logger.info("application_stopped")


app = FastAPI(
    title=settings.app_name,
    description="Personal finance ledger: accounts, holdings and transactions",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Added last so it wraps CORS and sees every request first
app.add_middleware(TraceMiddleware)

register_exception_handlers(app)

app.include_router(system_router)
app.include_router(v1_router)


def serve() -> None:
    """Run the API with uvicorn on the configured host and port."""
    uvicorn.run(
        "src.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        reload=settings.is_development,
    )


if __name__ == "__main__":
    serve()
