"""Encode endpoint."""

from fastapi import APIRouter

from geohash_ranges.config import settings
from geohash_ranges.geo import clamp_precision, encode_geohash
from geohash_ranges.models import EncodeRequest, EncodeResponse, Location

router = APIRouter()


@router.post("/encode", response_model=EncodeResponse)
async def encode_location(request: EncodeRequest) -> EncodeResponse:
    """
    Encode a location as a geohash.

    The precision falls back to the configured default and is clamped
    to [1, 22]; the response reports the length actually used.
    """
    precision = request.precision
    if precision is None:
        precision = settings.default_precision
    precision = clamp_precision(precision)

    geohash = encode_geohash(Location(lat=request.lat, lon=request.lon), precision)
    return EncodeResponse(geohash=geohash, precision=precision)
