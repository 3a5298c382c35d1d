"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from swiftwash.api.v1 import health, order_ids
from swiftwash.config import settings
from swiftwash.db import dispose_engine
from swiftwash.logging import setup_logging

# Configure logging before anything else
setup_logging()

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler for startup/shutdown events."""
    logger.info("Starting SwiftWash API", debug=settings.debug)

    yield

    logger.info("Shutting down SwiftWash API")
    await dispose_engine()
    logger.info("Database connections disposed")


app = FastAPI(
    title="SwiftWash API",
    description="Smart order ID generation for SwiftWash laundry orders",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.backend_cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(health.router, prefix="/api/v1", tags=["health"])
app.include_router(order_ids.router, prefix="/api/v1", tags=["order-ids"])
