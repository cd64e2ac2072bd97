"""Geohash encoding."""

from geohash_ranges.constants import BASE32, BITS_PER_CHAR, DEFAULT_PRECISION, MAX_PRECISION
from geohash_ranges.models import Location


def clamp_precision(precision: int) -> int:
    """Clamp a geohash length to [1, MAX_PRECISION]."""
    return max(1, min(precision, MAX_PRECISION))


def encode_geohash(location: Location, precision: int = DEFAULT_PRECISION) -> str:
    """
    Generate a geohash of the given length for a location.

    Longitude and latitude ranges are halved alternately, longitude first.
    Each halving contributes one bit: 1 when the value lies strictly above
    the midpoint, 0 otherwise. Every five bits become one base-32 character.

    Args:
        location: The location to encode
        precision: Length of the geohash, clamped to [1, 22]

    Returns:
        The geohash string
    """
    precision = clamp_precision(precision)

    lat_min, lat_max = -90.0, 90.0
    lon_min, lon_max = -180.0, 180.0

    chars: list[str] = []
    hash_value = 0
    bits = 0
    even = True

    while len(chars) < precision:
        if even:
            middle = (lon_min + lon_max) / 2
            if location.lon > middle:
                hash_value = (hash_value << 1) + 1
                lon_min = middle
            else:
                hash_value = hash_value << 1
                lon_max = middle
        else:
            middle = (lat_min + lat_max) / 2
            if location.lat > middle:
                hash_value = (hash_value << 1) + 1
                lat_min = middle
            else:
                hash_value = hash_value << 1
                lat_max = middle

        even = not even
        bits += 1
        if bits == BITS_PER_CHAR:
            chars.append(BASE32[hash_value])
            hash_value = 0
            bits = 0

    return "".join(chars)
