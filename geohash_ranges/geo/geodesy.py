"""Degree conversions on the WGS84 ellipsoid."""

import math

from geohash_ranges.constants import E2, EARTH_EQ_RADIUS_M, EPSILON


def degrees_to_radians(degrees: float) -> float:
    """Convert degrees to radians."""
    return degrees * math.pi / 180


def meters_to_longitude_degrees(distance: float, latitude: float) -> float:
    """
    Calculate the number of longitude degrees a distance spans at a latitude.

    Degrees of longitude shrink towards the poles, and the ellipsoid's
    flattening stretches them slightly compared to a perfect sphere.

    Args:
        distance: Distance in meters
        latitude: Latitude in degrees at which to measure

    Returns:
        Degrees of longitude, capped at 360
    """
    radians = degrees_to_radians(latitude)
    numerator = math.cos(radians) * EARTH_EQ_RADIUS_M * math.pi / 180
    denominator = 1 / math.sqrt(1 - E2 * math.sin(radians) * math.sin(radians))
    delta_degrees = numerator * denominator

    # At the poles longitude is meaningless, any distance covers the circle
    if delta_degrees < EPSILON:
        return 360 if distance > 0 else 0
    return min(360, distance / delta_degrees)


def wrap_longitude(longitude: float) -> float:
    """
    Wrap a longitude into [-180, 180].

    Values already in range are returned unchanged. A value that wraps onto
    the antimeridian keeps the sign of the input, so 540 becomes 180 and
    -540 becomes -180.
    """
    if -180 <= longitude <= 180:
        return longitude

    adjusted = longitude + 180
    if adjusted > 0:
        wrapped = math.fmod(adjusted, 360) - 180
        return 180.0 if wrapped == -180 else wrapped

    # Plain remainder arithmetic would send -540 to 180; keep the input sign
    wrapped = 180 + math.fmod(adjusted, 360)
    return -180.0 if wrapped == 180 else wrapped
