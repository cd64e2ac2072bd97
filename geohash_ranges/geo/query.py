"""Lexicographic range queries covering geohash cells."""

import logging
import math

from geohash_ranges.constants import BASE32, BITS_PER_CHAR, SENTINEL
from geohash_ranges.models import Location, QueryRange

from .bbox import bounding_box_bits, bounding_box_coordinates
from .encode import encode_geohash

logger = logging.getLogger(__name__)


def geohash_query(geohash: str, bits: int) -> QueryRange:
    """
    Calculate the range query for a geohash with a number of bits precision.

    Every geohash sharing the first ``bits`` bits with ``geohash`` sorts
    between the returned start and end, inclusive.

    Args:
        geohash: The geohash whose range to generate
        bits: Number of bits of precision

    Returns:
        The [start, end] range

    Raises:
        ValueError: If the geohash contains a character outside the alphabet
    """
    precision = math.ceil(bits / BITS_PER_CHAR)
    if len(geohash) < precision:
        return QueryRange(start=geohash, end=geohash + SENTINEL)

    geohash = geohash[:precision]
    base = geohash[:-1]
    last_value = BASE32.index(geohash[-1])

    significant_bits = bits - len(base) * BITS_PER_CHAR
    unused_bits = BITS_PER_CHAR - significant_bits

    # Drop the bits beyond the requested precision
    start_value = (last_value >> unused_bits) << unused_bits
    end_value = start_value + (1 << unused_bits)

    start = base + BASE32[start_value]
    if end_value > len(BASE32) - 1:
        return QueryRange(start=start, end=base + SENTINEL)
    return QueryRange(start=start, end=base + BASE32[end_value])


def query_bits(center: Location, radius_km: float) -> int:
    """Bit precision used for the range queries of a circle."""
    return max(1, bounding_box_bits(center, radius_km * 1000))


def geohash_queries(center: Location, radius_km: float) -> list[QueryRange]:
    """
    Calculate the set of range queries that fully contain a circle.

    Args:
        center: Center of the circle
        radius_km: Radius of the circle in kilometers

    Returns:
        Distinct query ranges, in the order they were first produced
    """
    radius = radius_km * 1000
    bits = query_bits(center, radius_km)
    precision = math.ceil(bits / BITS_PER_CHAR)

    queries: list[QueryRange] = []
    for location in bounding_box_coordinates(center, radius):
        query = geohash_query(encode_geohash(location, precision), bits)
        if query not in queries:
            queries.append(query)

    logger.debug(
        "Derived %d queries at %d bits for (%s, %s) r=%skm",
        len(queries),
        bits,
        center.lat,
        center.lon,
        radius_km,
    )
    return queries
