"""API endpoints for geohash range queries."""

from fastapi import APIRouter

from . import encode, queries

# Create a combined router for all API endpoints
api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(encode.router, tags=["encode"])
api_router.include_router(queries.router, tags=["queries"])
