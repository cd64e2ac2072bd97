"""Validation helpers for untrusted geohash inputs."""

from __future__ import annotations

from geohash_ranges.constants import BASE32, MAX_PRECISION


def validate_geohash(value: str) -> str:
    """Validate and normalize a geohash.

    Policy:
    - non-empty after trimming
    - at most 22 characters
    - only characters of the geohash alphabet (case-insensitive)

    Returns normalized geohash (trimmed, lowercase) or raises ValueError.
    """
    geohash = value.strip().lower()

    if not geohash:
        raise ValueError("geohash must not be empty")
    if len(geohash) > MAX_PRECISION:
        raise ValueError(f"geohash must be at most {MAX_PRECISION} characters")

    invalid = sorted({ch for ch in geohash if ch not in BASE32})
    if invalid:
        raise ValueError(f"geohash contains invalid characters: {''.join(invalid)}")

    return geohash
