"""Constants shared by the geohash and geodesy functions."""

# Characters used in location geohashes. ASCII order matches geohash order.
BASE32 = "0123456789bcdefghjkmnpqrstuvwxyz"

# Sorts after every BASE32 character; used as an open upper bound.
SENTINEL = "~"

BITS_PER_CHAR = 5

# Default geohash length
DEFAULT_PRECISION = 10

# Longest geohash we produce, in characters and in bits
MAX_PRECISION = 22
MAX_BITS_PRECISION = MAX_PRECISION * BITS_PER_CHAR

# Eccentricity squared, (EQ_RADIUS^2 - POL_RADIUS^2) / EQ_RADIUS^2 with a
# polar radius of 6356752.3 m. The exact value avoids rounding errors.
E2 = 0.00669447819799

# Equatorial radius of the earth in meters
EARTH_EQ_RADIUS_M = 6378137.0

# Meridional circumference of the earth in meters
EARTH_MERIDIONAL_CIRCUMFERENCE_M = 40007860

# Length of a degree of latitude at the equator
METERS_PER_DEGREE_LATITUDE = 110574

# Cutoff for rounding errors on float calculations
EPSILON = 1e-12
