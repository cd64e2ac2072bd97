"""
geohash-ranges service

Geohash encoding and range queries over HTTP.
"""

import argparse
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from geohash_ranges import __version__
from geohash_ranges.api import api_router
from geohash_ranges.config import settings

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("geohash_ranges")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Logs the effective configuration on startup.
    """
    # Startup
    logger.info(f"Starting geohash-ranges v{__version__}")
    logger.info(f"Service URL: {settings.service_url}")
    logger.info(
        f"Default precision: {settings.default_precision}, "
        f"max radius: {settings.max_radius_km} km"
    )

    yield

    # Shutdown
    logger.info("Shutting down geohash-ranges")


# Create the FastAPI application
app = FastAPI(
    title="geohash-ranges",
    description="Geohash encoding and range queries for sorted key-value stores",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Include all API routes
app.include_router(api_router)


@app.get("/", tags=["root"])
async def root():
    """Root endpoint with basic service info."""
    return {
        "name": "geohash-ranges",
        "version": __version__,
        "service": settings.service_url,
        "docs": f"{settings.service_url}/docs",
    }


@app.get("/health", tags=["health"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


def run():
    """Run the service using uvicorn."""
    parser = argparse.ArgumentParser(description="geohash-ranges service")
    parser.add_argument(
        "-p", "--port",
        type=int,
        default=None,
        help=f"Port to listen on (default: {settings.port}, or GEOHASH_PORT env var)"
    )
    parser.add_argument(
        "-H", "--host",
        type=str,
        default=None,
        help=f"Host to bind to (default: {settings.host}, or GEOHASH_HOST env var)"
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development"
    )
    args = parser.parse_args()

    # Command line args override config/env vars
    host = args.host if args.host is not None else settings.host
    port = args.port if args.port is not None else settings.port

    uvicorn.run(
        "geohash_ranges.main:app",
        host=host,
        port=port,
        reload=args.reload,
    )


if __name__ == "__main__":
    run()
