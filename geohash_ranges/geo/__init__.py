"""Geohash encoding and range query utilities."""

from geohash_ranges.constants import BASE32, DEFAULT_PRECISION, MAX_BITS_PRECISION, MAX_PRECISION

from .bbox import (
    bounding_box_bits,
    bounding_box_coordinates,
    latitude_bits,
    longitude_bits,
)
from .encode import clamp_precision, encode_geohash
from .geodesy import degrees_to_radians, meters_to_longitude_degrees, wrap_longitude
from .query import geohash_queries, geohash_query, query_bits

__all__ = [
    "BASE32",
    "DEFAULT_PRECISION",
    "MAX_PRECISION",
    "MAX_BITS_PRECISION",
    "degrees_to_radians",
    "meters_to_longitude_degrees",
    "wrap_longitude",
    "clamp_precision",
    "encode_geohash",
    "latitude_bits",
    "longitude_bits",
    "bounding_box_bits",
    "bounding_box_coordinates",
    "geohash_query",
    "geohash_queries",
    "query_bits",
]
