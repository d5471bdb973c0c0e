"""
Point-in-polygon membership with holes.

Every ring of a Polygon or MultiPolygon (outer boundaries and holes alike)
is tested on its own; a point is inside the geometry when it falls inside
an odd number of rings. Points inside a hole are inside both the hole and
its boundary, giving an even count.
"""
from typing import Any, List, Tuple

import shapely
from shapely.geometry import Polygon

from geohash_poly.core.geometry import to_polygons
from geohash_poly.utils.exceptions import GeometryError

# (latitude, longitude), as returned by geohash.decode
Point = Tuple[float, float]


def _polygon_parts(geometry: Any) -> List[Polygon]:
    geom_type = getattr(geometry, 'geom_type', None)
    if geom_type == 'Polygon':
        return [geometry]
    if geom_type == 'MultiPolygon':
        return list(geometry.geoms)
    if geom_type is not None:
        return []

    # GeoJSON mappings and __geo_interface__ objects
    try:
        return to_polygons(geometry)
    except GeometryError:
        return []


def _ring_polygons(geometry: Any) -> List[Polygon]:
    """Prepared single-ring polygons for every ring of a (Multi)Polygon."""
    rings = []
    for part in _polygon_parts(geometry):
        if part.is_empty:
            continue
        for ring in [part.exterior, *part.interiors]:
            ring_polygon = Polygon(ring)
            shapely.prepare(ring_polygon)
            rings.append(ring_polygon)
    return rings


class RingParity:
    """
    Reusable membership test for one geometry.

    Rings are extracted and prepared once, so repeated ``contains`` calls
    only pay for the point-in-ring tests. GeoJSON mappings are read the
    same way as ``to_polygons`` reads them; anything that is not polygonal
    contains nothing.

    Example:
        >>> square = Polygon([(0, 0), (0, 1), (1, 1), (1, 0)])
        >>> RingParity(square).contains((0.5, 0.5))
        True
    """

    def __init__(self, geometry: Any):
        self.rings = _ring_polygons(geometry)

    def crossings(self, point: Point) -> int:
        """Number of rings whose interior holds the point."""
        latitude, longitude = point
        return sum(
            1 for ring in self.rings
            if shapely.contains_xy(ring, longitude, latitude)
        )

    def contains(self, point: Point) -> bool:
        return self.crossings(point) % 2 == 1


def is_inside(point: Point, geometry: Any) -> bool:
    """
    Test whether a point lies inside a Polygon or MultiPolygon.

    Args:
        point: (latitude, longitude) in decimal degrees
        geometry: shapely Polygon or MultiPolygon, or a GeoJSON Polygon,
            MultiPolygon or Feature mapping; any other value is
            treated as containing nothing

    Returns:
        True if the point is inside an odd number of rings

    Example:
        >>> donut = Polygon(
        ...     [(0, 0), (0, 10), (10, 10), (10, 0)],
        ...     [[(4, 4), (4, 6), (6, 6), (6, 4)]],
        ... )
        >>> is_inside((5, 5), donut)
        False
        >>> is_inside((2, 2), donut)
        True
        >>> is_inside((0.5, 0.5), {
        ...     "type": "Polygon",
        ...     "coordinates": [[[0, 0], [0, 1], [1, 1], [1, 0], [0, 0]]],
        ... })
        True
    """
    return RingParity(geometry).contains(point)
