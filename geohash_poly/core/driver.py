"""
Coverage driver: pull rows from the scanner until coverage is complete.

Three ways to consume a coverage:
    - iter_rows: lazily, one west-to-east row of cells at a time
    - iter_cells: lazily, one cell at a time
    - polygon_hash: all cells collected into a single list

Cells are not deduplicated; a cell shared by two polygons (or by two rows
of a clipped polygon) is emitted each time it is found.
"""
from typing import Any, Callable, Iterator, List, Optional, Union

from geohash_poly.core.engine import CoverageState, initial_state, next_row
from geohash_poly.core.geometry import to_polygons
from geohash_poly.utils.config import CoverageOptions, OptionsLike, resolve_options
from geohash_poly.utils.exceptions import GeohashPolyError
from geohash_poly.utils.logging_config import get_logger

logger = get_logger(__name__)

Completion = Callable[[Optional[Exception], List[str]], Any]


def _rows(state: CoverageState, options: CoverageOptions) -> Iterator[List[str]]:
    """Yield non-empty rows; empty rows only mark polygon boundaries."""
    rows = 0
    cells = 0
    while True:
        state, row = next_row(state, options)
        if row:
            rows += 1
            cells += len(row)
            yield row
        elif state.exhausted:
            break

    logger.info("coverage_completed", rows=rows, cells=cells)


def iter_rows(
    geometry: Any,
    options: OptionsLike = None,
    **overrides
) -> Iterator[List[str]]:
    """
    Lazily cover a geometry, one row at a time.

    Rows run north to south; each row lists its cells west to east.
    Geometry and options are validated on the first pull.

    Args:
        geometry: Polygon/MultiPolygon input accepted by ``to_polygons``
        options: CoverageOptions or mapping of options
        **overrides: Individual option values (precision, split_at, ...)

    Yields:
        Non-empty lists of geohash strings

    Raises:
        ConfigurationError: If options are invalid
        GeometryError: If the input is not a geometry
        CoverageError: If a row cannot be computed; the iterator then ends

    Example:
        >>> square = {'type': 'Polygon', 'coordinates': [[[0, 0], [0, 1], [1, 1], [1, 0], [0, 0]]]}
        >>> next(iter_rows(square, precision=4))
        ['s00j', 's00m', 's00t']
    """
    options = resolve_options(options, **overrides)
    state = initial_state(to_polygons(geometry))

    logger.info(
        "coverage_started",
        polygons=len(state.queue),
        precision=options.precision,
        split_at=options.split_at,
    )
    yield from _rows(state, options)


def iter_cells(
    geometry: Any,
    options: OptionsLike = None,
    **overrides
) -> Iterator[str]:
    """Lazily cover a geometry, one cell at a time (row boundaries erased)."""
    for row in iter_rows(geometry, options, **overrides):
        yield from row


def stream(
    geometry: Any,
    precision: Optional[int] = None,
    row_mode: Optional[bool] = None,
    options: OptionsLike = None,
    **overrides
) -> Union[Iterator[List[str]], Iterator[str]]:
    """
    Cover a geometry as a lazy stream.

    A stream cannot be rewound; call ``stream`` again to start over.

    Args:
        geometry: Polygon/MultiPolygon input accepted by ``to_polygons``
        precision: Geohash length (default 6)
        row_mode: If True yield whole rows, else single cells (default False)
        options: CoverageOptions or mapping of options
        **overrides: Other option values (split_at, row_buffer)

    Returns:
        Iterator of rows in row mode, iterator of cells otherwise
    """
    options = resolve_options(options, precision=precision, row_mode=row_mode, **overrides)
    if options.row_mode:
        return iter_rows(geometry, options)
    return iter_cells(geometry, options)


def polygon_hash(
    geometry: Any,
    precision: Optional[int] = None,
    callback: Optional[Completion] = None,
    options: OptionsLike = None,
    **overrides
) -> Optional[List[str]]:
    """
    Compute all geohash cells covering a geometry.

    Args:
        geometry: Polygon/MultiPolygon input accepted by ``to_polygons``
        precision: Geohash length (default 6)
        callback: Optional completion ``callback(error, cells)``. When given,
            it is called exactly once, with ``(None, cells)`` on success or
            ``(error, [])`` on failure, and nothing is raised or returned.
        options: CoverageOptions or mapping of options
        **overrides: Other option values (split_at, row_buffer)

    Returns:
        Flattened list of cells, rows north to south and cells west to
        east, duplicates preserved; None when a callback is given

    Raises:
        GeohashPolyError: On invalid options, input or codec failure
            (only without a callback)

    Example:
        >>> square = {'type': 'Polygon', 'coordinates': [[[0, 0], [0, 1], [1, 1], [1, 0], [0, 0]]]}
        >>> len(polygon_hash(square, precision=4))
        18
    """
    try:
        cells = []
        for row in iter_rows(geometry, options, precision=precision, **overrides):
            cells.extend(row)
    except GeohashPolyError as e:
        if callback is None:
            raise
        logger.error("coverage_failed", error=str(e))
        callback(e, [])
        return None

    if callback is not None:
        callback(None, cells)
        return None
    return cells
