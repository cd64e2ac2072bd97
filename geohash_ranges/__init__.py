"""
geohash-ranges - geohash encoding and range queries for sorted key-value stores.
"""

__version__ = "0.1.0"
