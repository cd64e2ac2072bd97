"""Range query endpoints."""

import math

from fastapi import APIRouter, HTTPException

from geohash_ranges.config import settings
from geohash_ranges.geo import geohash_queries, geohash_query, query_bits
from geohash_ranges.constants import BITS_PER_CHAR
from geohash_ranges.models import (
    Location,
    QueriesRequest,
    QueriesResponse,
    QueryRequest,
    QueryResponse,
)

router = APIRouter()


@router.post("/query", response_model=QueryResponse)
async def query_geohash(request: QueryRequest) -> QueryResponse:
    """Get the range query matching every geohash that shares a bit prefix."""
    return QueryResponse(query=geohash_query(request.geohash, request.bits))


@router.post("/queries", response_model=QueriesResponse)
async def query_circle(request: QueriesRequest) -> QueriesResponse:
    """
    Get the range queries that fully contain a circle.

    The caller runs each [start, end] pair as an inclusive scan over a
    geohash-keyed index; results still need a distance filter since the
    ranges cover more than the circle.
    """
    # Validate radius against server maximum
    if request.radius_km > settings.max_radius_km:
        raise HTTPException(
            status_code=400,
            detail=f"radius exceeds maximum of {settings.max_radius_km} km",
        )

    center = Location(lat=request.center.lat, lon=request.center.lon)
    bits = query_bits(center, request.radius_km)

    return QueriesResponse(
        bits=bits,
        precision=math.ceil(bits / BITS_PER_CHAR),
        queries=geohash_queries(center, request.radius_km),
    )
