"""
FastAPI Main Application
Holdings screen backed by a single view state controller
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from app.config import settings
from app.core.logging import get_logger, setup_logging
from app.api.routes import health, holdings
from app.domain.services.view_state_controller import ViewStateController
from app.infrastructure.holdings_source.source_factory import get_holdings_source

setup_logging(settings.LOG_LEVEL)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """
    Application lifespan manager
    One controller per process start, i.e. one activation of the screen
    """
    logger.info(f"🚀 Starting Holdings Assistant ({settings.APP_ENV})")

    source = get_holdings_source(settings)
    controller = ViewStateController(
        source,
        fetch_timeout=settings.HOLDINGS_FETCH_TIMEOUT_SECONDS,
    )
    app.state.holdings_controller = controller
    controller.request_load()

    logger.info(f"   ✅ API Server: http://{settings.API_HOST}:{settings.API_PORT}")
    logger.info(f"   ✅ Holdings source: {settings.HOLDINGS_SOURCE}")

    yield

    logger.info("🛑 Shutting down Holdings Assistant...")
    await controller.aclose()
    app.state.holdings_controller = None
    logger.info("👋 Shutdown complete")


# Create FastAPI app
app = FastAPI(
    title="Holdings Assistant",
    description="Portfolio holdings with aggregate P&L and a togglable summary panel",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router, tags=["Health"])
app.include_router(holdings.router, prefix="/api/v1/holdings", tags=["Holdings"])


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
    )
