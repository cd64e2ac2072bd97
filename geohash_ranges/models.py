"""
Pydantic models for geohash range queries.

These models define the library's value types and the request/response
structures for the HTTP API.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from geohash_ranges.validation import validate_geohash


# -----------------------------------------------------------------------------
# Core Models
# -----------------------------------------------------------------------------


class Location(BaseModel):
    """A point on the earth's surface (WGS84 coordinates).

    Bounds are not enforced here; out-of-range values are accepted and the
    geohash functions clamp rather than reject them.
    """

    model_config = ConfigDict(frozen=True)

    lat: float = Field(..., description="Latitude in degrees")
    lon: float = Field(..., description="Longitude in degrees")


class QueryRange(BaseModel):
    """A closed lexicographic range [start, end] of geohashes."""

    model_config = ConfigDict(frozen=True)

    start: str
    end: str

    def contains(self, geohash: str) -> bool:
        """Whether a geohash sorts within this range, inclusive."""
        return self.start <= geohash <= self.end


# -----------------------------------------------------------------------------
# Encode Models
# -----------------------------------------------------------------------------


class EncodeRequest(BaseModel):
    """Request to encode a location as a geohash."""

    lat: float = Field(..., ge=-90, le=90, description="Latitude in degrees")
    lon: float = Field(..., ge=-180, le=180, description="Longitude in degrees")
    precision: int | None = Field(
        default=None, description="Geohash length, clamped to [1, 22]"
    )


class EncodeResponse(BaseModel):
    """Response containing an encoded geohash."""

    status: Literal["ok"] = "ok"
    geohash: str
    precision: int


# -----------------------------------------------------------------------------
# Query Models
# -----------------------------------------------------------------------------


class QueryRequest(BaseModel):
    """Request for the range query of a single geohash."""

    geohash: str
    bits: int = Field(..., ge=1, le=110, description="Bits of precision")

    @field_validator("geohash")
    @classmethod
    def normalize_geohash(cls, v: str) -> str:
        return validate_geohash(v)


class QueryResponse(BaseModel):
    """Response containing a single range query."""

    status: Literal["ok"] = "ok"
    query: QueryRange


class Center(BaseModel):
    """Center of a circle in a queries request."""

    lat: float = Field(..., ge=-90, le=90, description="Latitude in degrees")
    lon: float = Field(..., ge=-180, le=180, description="Longitude in degrees")


class QueriesRequest(BaseModel):
    """Request for the range queries covering a circle."""

    center: Center
    radius_km: float = Field(..., gt=0, description="Radius in kilometers")


class QueriesResponse(BaseModel):
    """Response containing the range queries covering a circle."""

    status: Literal["ok"] = "ok"
    bits: int = Field(description="Bit precision of the queries")
    precision: int = Field(description="Geohash length the queries were derived at")
    queries: list[QueryRange]
