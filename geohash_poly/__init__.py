"""
geohash-poly: geohash cells covering polygons and multi-polygons.

Example:
    >>> from geohash_poly import polygon_hash
    >>> square = {'type': 'Polygon', 'coordinates': [[[0, 0], [0, 1], [1, 1], [1, 0], [0, 0]]]}
    >>> polygon_hash(square, precision=4)[:3]
    ['s00j', 's00m', 's00t']
"""
from geohash_poly.core import (
    is_inside,
    iter_rows,
    iter_cells,
    stream,
    polygon_hash,
)
from geohash_poly.utils.config import CoverageOptions, load_config

__version__ = "0.1.0"

__all__ = [
    'is_inside',
    'iter_rows',
    'iter_cells',
    'stream',
    'polygon_hash',
    'CoverageOptions',
    'load_config',
]
