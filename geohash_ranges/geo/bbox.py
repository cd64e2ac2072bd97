"""Bounding box sizing for geohash range queries."""

import math

from geohash_ranges.constants import (
    EARTH_MERIDIONAL_CIRCUMFERENCE_M,
    MAX_BITS_PRECISION,
    METERS_PER_DEGREE_LATITUDE,
)
from geohash_ranges.models import Location

from .geodesy import meters_to_longitude_degrees, wrap_longitude


def latitude_bits(resolution: float) -> float:
    """Bits of latitude needed to reach a resolution in meters."""
    # A zero resolution needs every bit
    if resolution <= 0:
        return float(MAX_BITS_PRECISION)
    return min(
        math.log2(EARTH_MERIDIONAL_CIRCUMFERENCE_M / 2 / resolution),
        float(MAX_BITS_PRECISION),
    )


def longitude_bits(resolution: float, latitude: float) -> float:
    """
    Bits of longitude needed to reach a resolution in meters at a latitude.

    Args:
        resolution: The desired resolution in meters
        latitude: The latitude used in the conversion

    Returns:
        Number of bits, never less than 1
    """
    degrees = meters_to_longitude_degrees(resolution, latitude)
    if abs(degrees) > 0.000001:
        return max(1.0, math.log2(360 / degrees))
    return 1.0


def _latitude_bounds(latitude: float, size: float) -> tuple[float, float]:
    """North and south latitudes of a box, clamped to the poles."""
    delta = size / METERS_PER_DEGREE_LATITUDE
    return min(90.0, latitude + delta), max(-90.0, latitude - delta)


def bounding_box_bits(location: Location, size: float) -> int:
    """
    Compute the number of geohash bits whose cells are no larger than a box.

    Longitude degrees shrink with latitude, so longitude bits are computed
    at both the northern and southern edge of the box and the smaller wins.
    Longitude bits sit on odd positions of the interleaved sequence, hence
    the ``- 1``.

    Args:
        location: Center of the box
        size: Half the box's side length in meters

    Returns:
        Bit count in [1, 110]
    """
    latitude_north, latitude_south = _latitude_bounds(location.lat, size)

    bits_latitude = math.floor(latitude_bits(size)) * 2
    bits_longitude_north = math.floor(longitude_bits(size, latitude_north)) * 2 - 1
    bits_longitude_south = math.floor(longitude_bits(size, latitude_south)) * 2 - 1

    bits = min(
        bits_latitude,
        bits_longitude_north,
        bits_longitude_south,
        MAX_BITS_PRECISION,
    )
    return max(1, bits)


def bounding_box_coordinates(center: Location, radius: float) -> list[Location]:
    """
    Compute the center and eight points on the bounding box of a circle.

    At least one geohash of these nine points, truncated to the precision
    of the circle, is a prefix of any geohash that lies inside the circle.

    Args:
        center: Center of the circle
        radius: Radius of the circle in meters

    Returns:
        Nine locations, center first
    """
    latitude_north, latitude_south = _latitude_bounds(center.lat, radius)
    longitude_delta = max(
        meters_to_longitude_degrees(radius, latitude_north),
        meters_to_longitude_degrees(radius, latitude_south),
    )
    west = wrap_longitude(center.lon - longitude_delta)
    east = wrap_longitude(center.lon + longitude_delta)

    return [
        Location(lat=lat, lon=lon)
        for lat in (center.lat, latitude_north, latitude_south)
        for lon in (center.lon, west, east)
    ]
