"""
Row-scanning geohash coverage.

Each polygon's bounding box is walked row by row (north to south) and,
within a row, cell by cell (west to east). A cell is emitted when its
center lies inside the polygon.

The scanner is a pure state transition: ``next_row`` takes a
CoverageState and returns the following state together with one row of
cells. Nothing is mutated, so any intermediate state can be replayed.
"""
from dataclasses import dataclass, replace
from typing import Iterable, List, Optional, Tuple

from shapely.geometry import Polygon

from geohash_poly.core.geometry import Bounds, clip_to_band, polygon_bounds
from geohash_poly.core.membership import RingParity
from geohash_poly.utils import geohash
from geohash_poly.utils.config import CoverageOptions
from geohash_poly.utils.error_handling import coverage_stage
from geohash_poly.utils.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ScanState:
    """Scan position within the polygon at the head of the queue."""
    bounds: Bounds
    row_hash: Optional[str] = None


@dataclass(frozen=True)
class CoverageState:
    """Polygons still to scan, plus the scan position in the first one."""
    queue: Tuple[Polygon, ...] = ()
    scan: Optional[ScanState] = None

    @property
    def exhausted(self) -> bool:
        return not self.queue


def initial_state(polygons: Iterable[Polygon]) -> CoverageState:
    return CoverageState(queue=tuple(polygons))


def _pop(state: CoverageState) -> CoverageState:
    logger.debug("polygon_exhausted", remaining=len(state.queue) - 1)
    return CoverageState(queue=state.queue[1:], scan=None)


def _row_membership(
    polygon: Polygon,
    bounds: Bounds,
    row_south: float,
    row_north: float,
    options: CoverageOptions
) -> RingParity:
    """Membership test for one row, clipped to the row band for large polygons."""
    if len(polygon.exterior.coords) < options.split_at:
        return RingParity(polygon)

    _, west, _, east = bounds
    buffer = options.row_buffer
    clipped = clip_to_band(
        polygon,
        west - buffer,
        row_south - buffer,
        east + buffer,
        row_north + buffer,
    )
    return RingParity(clipped if clipped is not None else polygon)


def _scan_row(
    state: CoverageState,
    polygon: Polygon,
    scan: ScanState,
    options: CoverageOptions
) -> Tuple[CoverageState, List[str]]:
    south, west, north, east = scan.bounds
    precision = options.precision

    row_hash = scan.row_hash or geohash.encode(north, west, precision)
    row_south, _, row_north, _ = geohash.decode_bbox(row_hash)

    if row_north <= south:
        return _pop(state), []

    membership = _row_membership(polygon, scan.bounds, row_south, row_north, options)

    column_hash = row_hash
    column_center = geohash.decode(column_hash)
    # First cell past the eastern edge of the bounding box. For a box spanning
    # every longitude this wraps around to the seed itself.
    sentinel = geohash.neighbor(
        geohash.encode(column_center[0], east, precision),
        geohash.EAST
    )

    row = []
    while True:
        if membership.contains(column_center):
            row.append(column_hash)
        column_hash = geohash.neighbor(column_hash, geohash.EAST)
        if column_hash == sentinel:
            break
        column_center = geohash.decode(column_hash)

    south_hash = geohash.neighbor(row_hash, geohash.SOUTH)

    # Southernmost row on the map
    if south_hash == row_hash:
        return _pop(state), row

    return replace(state, scan=replace(scan, row_hash=south_hash)), row


@coverage_stage("row")
def next_row(
    state: CoverageState,
    options: CoverageOptions
) -> Tuple[CoverageState, List[str]]:
    """
    Produce the next row of covering cells.

    Args:
        state: Current coverage state
        options: Validated coverage options

    Returns:
        Tuple of (next state, row). The row holds the cells of one latitude
        band, west to east, and may be empty: an empty row either marks the
        end of a polygon or, when the returned state is exhausted, the end
        of coverage.

    Raises:
        CoverageError: If the geohash codec rejects a coordinate

    Example:
        >>> square = Polygon([(0, 0), (0, 1), (1, 1), (1, 0)])
        >>> state, row = next_row(initial_state([square]), CoverageOptions(precision=4))
        >>> row
        ['s00j', 's00m', 's00t']
    """
    if state.exhausted:
        return state, []

    polygon = state.queue[0]
    scan = state.scan

    if scan is None:
        scan = ScanState(bounds=polygon_bounds(polygon))
        logger.debug(
            "polygon_scan_started",
            bounds=scan.bounds,
            vertices=len(polygon.exterior.coords),
            clipped=len(polygon.exterior.coords) >= options.split_at,
        )

    return _scan_row(state, polygon, scan, options)
