"""
Data loading module.

Provides GeoJSON input loading for the command line tool.
"""
from geohash_poly.data.loaders import load_geojson

__all__ = [
    'load_geojson',
]
