"""
Geometry input handling for polygon coverage.

Normalizes caller geometries (shapely objects or GeoJSON-like mappings)
into the ordered queue of polygons the row scanner consumes, and clips
complex polygons down to a single row band.
"""
from typing import Any, List, Mapping, Optional, Sequence, Tuple, Union

from shapely.errors import GEOSException
from shapely.geometry import MultiPolygon, Polygon, box
from shapely.geometry.base import BaseGeometry

from geohash_poly.utils.exceptions import GeometryError
from geohash_poly.utils.logging_config import get_logger

logger = get_logger(__name__)

# (south, west, north, east), the geohash codec's axis order
Bounds = Tuple[float, float, float, float]


def _clean_ring(ring: Sequence[Sequence[float]]) -> Optional[List[Tuple[float, float]]]:
    """Return ring positions as (lon, lat) tuples, or None if it cannot bound an area."""
    positions = [(float(p[0]), float(p[1])) for p in ring]
    if positions and positions[0] == positions[-1]:
        positions = positions[:-1]
    if len(set(positions)) < 3:
        return None
    return positions


def _polygon_from_rings(rings: Sequence[Sequence[Sequence[float]]]) -> Optional[Polygon]:
    """Build a polygon from GeoJSON rings, dropping degenerate rings."""
    if not rings:
        return None

    shell = _clean_ring(rings[0])
    if shell is None:
        return None

    holes = [hole for hole in (_clean_ring(r) for r in rings[1:]) if hole is not None]
    return Polygon(shell, holes)


def _polygons_from_mapping(geojson: Mapping[str, Any]) -> List[Polygon]:
    geom_type = geojson.get('type')

    if geom_type == 'FeatureCollection':
        polygons = []
        for feature in geojson.get('features') or []:
            polygons.extend(_polygons_from_mapping(feature))
        return polygons

    if geom_type == 'Feature':
        geometry = geojson.get('geometry')
        if not geometry:
            return []
        return _polygons_from_mapping(geometry)

    coordinates = geojson.get('coordinates') or []

    if geom_type == 'Polygon':
        polygon = _polygon_from_rings(coordinates)
        return [polygon] if polygon is not None else []

    if geom_type == 'MultiPolygon':
        polygons = [_polygon_from_rings(rings) for rings in coordinates]
        return [p for p in polygons if p is not None]

    logger.warning("non_polygonal_geometry_ignored", geometry_type=geom_type)
    return []


def _polygons_from_shapely(geometry: BaseGeometry) -> List[Polygon]:
    if geometry.is_empty:
        return []
    if geometry.geom_type == 'Polygon':
        return [geometry]
    if geometry.geom_type == 'MultiPolygon':
        return [part for part in geometry.geoms if not part.is_empty]

    logger.warning("non_polygonal_geometry_ignored", geometry_type=geometry.geom_type)
    return []


def to_polygons(geometry: Union[BaseGeometry, Mapping[str, Any], Any]) -> List[Polygon]:
    """
    Normalize a polygonal input into the ordered list of polygons to scan.

    MultiPolygon parts and FeatureCollection members are queued separately,
    in input order. Degenerate polygons (empty, or an outer ring with fewer
    than three distinct positions) are skipped, as are non-polygonal
    geometries such as points and lines.

    Args:
        geometry: shapely Polygon/MultiPolygon, a GeoJSON mapping of type
            Polygon, MultiPolygon, Feature or FeatureCollection, or any object
            exposing ``__geo_interface__``

    Returns:
        List of shapely Polygons

    Raises:
        GeometryError: If the input is not a geometry at all

    Example:
        >>> to_polygons({'type': 'MultiPolygon', 'coordinates': [
        ...     [[[0, 0], [0, 1], [1, 1], [0, 0]]],
        ...     [[[2, 2], [2, 3], [3, 3], [2, 2]]],
        ... ]})
        [<POLYGON ((0 0, 0 1, 1 1, 0 0))>, <POLYGON ((2 2, 2 3, 3 3, 2 2))>]
    """
    if isinstance(geometry, BaseGeometry):
        return _polygons_from_shapely(geometry)

    if not isinstance(geometry, Mapping) and hasattr(geometry, '__geo_interface__'):
        geometry = geometry.__geo_interface__

    if not isinstance(geometry, Mapping):
        raise GeometryError(f"Unsupported geometry input: {type(geometry).__name__}")

    try:
        return _polygons_from_mapping(geometry)
    except (TypeError, ValueError, IndexError) as e:
        raise GeometryError(f"Malformed GeoJSON coordinates: {e}") from e


def polygon_bounds(polygon: Polygon) -> Bounds:
    """
    Bounding box of a polygon in geohash axis order.

    Args:
        polygon: shapely Polygon

    Returns:
        Tuple of (south, west, north, east)
    """
    min_x, min_y, max_x, max_y = polygon.bounds
    return min_y, min_x, max_y, max_x


def _polygonal_parts(geometry: BaseGeometry) -> List[Polygon]:
    if geometry.is_empty:
        return []
    if geometry.geom_type == 'Polygon':
        return [geometry]
    if geometry.geom_type in ('MultiPolygon', 'GeometryCollection'):
        parts = []
        for part in geometry.geoms:
            parts.extend(_polygonal_parts(part))
        return parts
    return []


def clip_to_band(
    polygon: Polygon,
    west: float,
    south: float,
    east: float,
    north: float
) -> Optional[Union[Polygon, MultiPolygon]]:
    """
    Intersect a polygon with a rectangular band.

    Only the polygonal part of the intersection is kept; slivers that
    collapse to lines or points are dropped.

    Args:
        polygon: Polygon to clip
        west, south, east, north: Band rectangle in degrees

    Returns:
        Polygon or MultiPolygon, or None when the intersection is empty
        or GEOS fails to compute it
    """
    band = box(west, south, east, north)

    try:
        intersection = polygon.intersection(band)
    except GEOSException as e:
        logger.warning("row_clip_failed", error=str(e), band=(west, south, east, north))
        return None

    parts = _polygonal_parts(intersection)
    if not parts:
        return None
    if len(parts) == 1:
        return parts[0]
    return MultiPolygon(parts)
