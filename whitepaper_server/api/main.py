"""FastAPI main application for Whitepaper Server."""

import logging
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from whitepaper_server import __version__
from whitepaper_server.api.error_handlers import register_error_handlers
from whitepaper_server.core.router import WhitepaperRouter
from whitepaper_server.core.store import DocumentStore
from whitepaper_server.models.api.system import HealthResponse, RootResponse
from whitepaper_server.models.config.server import ServerSettings

logger = logging.getLogger(__name__)


def create_app(
    store: DocumentStore | None = None, settings: ServerSettings | None = None
) -> FastAPI:
    """Build the API around a document store.

    Args:
        store: Document store to serve; defaults to the bundled whitepaper
        settings: Server settings; defaults to environment configuration
    """
    settings = settings or ServerSettings()
    store = store or DocumentStore.default()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        logger.info(f"Starting Whitepaper Server API with {store!r}")
        yield
        logger.info("Whitepaper Server API shutdown complete")

    app = FastAPI(
        title="Whitepaper Server API",
        description="MCP-style tools and prompts over the Succinct Network whitepaper",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.settings = settings
    app.state.router = WhitepaperRouter(store, settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    @app.get("/health", response_model=HealthResponse)
    async def health_check():
        """Health check endpoint."""
        return HealthResponse(
            message="Succinct Network MCP Server is running",
            version=__version__,
            timestamp=datetime.now(),
        )

    @app.get("/", response_model=RootResponse)
    async def root():
        """Root endpoint."""
        return RootResponse(
            message="Whitepaper Server API", version=__version__, docs="/docs"
        )

    setup_routers(app)
    return app


def setup_routers(app: FastAPI) -> None:
    from whitepaper_server.api.prompts import router as prompts_router
    from whitepaper_server.api.rpc import router as rpc_router
    from whitepaper_server.api.tools import router as tools_router

    app.include_router(tools_router, prefix="/tools", tags=["tools"])
    app.include_router(prompts_router, prefix="/prompts", tags=["prompts"])
    app.include_router(rpc_router, tags=["rpc"])


def run(settings: ServerSettings | None = None) -> None:
    """Serve the API with uvicorn."""
    import uvicorn

    settings = settings or ServerSettings()
    uvicorn.run(
        create_app(settings=settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
