"""
Core coverage modules.

Contains geometry normalization, the ring-parity membership test, the
row-scanning engine and the driver that turns rows into streams or lists.
"""
from geohash_poly.core.membership import is_inside, RingParity
from geohash_poly.core.geometry import to_polygons, polygon_bounds, clip_to_band
from geohash_poly.core.engine import CoverageState, ScanState, initial_state, next_row
from geohash_poly.core.driver import iter_rows, iter_cells, stream, polygon_hash

__all__ = [
    'is_inside',
    'RingParity',
    'to_polygons',
    'polygon_bounds',
    'clip_to_band',
    'CoverageState',
    'ScanState',
    'initial_state',
    'next_row',
    'iter_rows',
    'iter_cells',
    'stream',
    'polygon_hash',
]
