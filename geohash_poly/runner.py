"""
Command line runner for polygon geohash coverage.

Reads a GeoJSON Polygon, MultiPolygon, Feature or FeatureCollection and
writes the geohash cells that cover it.

Usage:
    python -m geohash_poly.runner data/area.geojson --precision 7

    # One line per row instead of one line per cell
    python -m geohash_poly.runner data/area.geojson --rows

    # Cells as a GeoJSON FeatureCollection
    python -m geohash_poly.runner data/area.geojson --format geojson --output cells.geojson

    # Options from a YAML file (precision, row_mode, split_at, row_buffer)
    python -m geohash_poly.runner data/area.geojson --config config/coverage.yaml
"""
import argparse
import json
import sys
from pathlib import Path
from typing import IO, Iterable, List, Optional, Union

from shapely.geometry import mapping

from geohash_poly.core.driver import stream
from geohash_poly.data.loaders import load_geojson
from geohash_poly.utils.config import load_config, resolve_options
from geohash_poly.utils.geohash import geohash_polygon
from geohash_poly.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)

OUTPUT_FORMATS = ['text', 'json', 'geojson']


def _flatten(items: Iterable[Union[str, List[str]]], row_mode: bool) -> Iterable[str]:
    if not row_mode:
        return items
    return (cell for row in items for cell in row)


def write_text(items: Iterable, out: IO[str], row_mode: bool) -> int:
    """Write one cell per line, or one space separated row per line."""
    count = 0
    for item in items:
        if row_mode:
            out.write(' '.join(item) + '\n')
            count += len(item)
        else:
            out.write(item + '\n')
            count += 1
    return count


def write_json(items: Iterable, out: IO[str], row_mode: bool) -> int:
    """Write a JSON array of cells, or of rows."""
    collected = list(items)
    json.dump(collected, out)
    out.write('\n')
    if row_mode:
        return sum(len(row) for row in collected)
    return len(collected)


def write_geojson(items: Iterable, out: IO[str], row_mode: bool) -> int:
    """Write a FeatureCollection with one Polygon feature per cell."""
    features = [
        {
            'type': 'Feature',
            'geometry': mapping(geohash_polygon(cell)),
            'properties': {'geohash': cell},
        }
        for cell in _flatten(items, row_mode)
    ]
    json.dump({'type': 'FeatureCollection', 'features': features}, out)
    out.write('\n')
    return len(features)


WRITERS = {
    'text': write_text,
    'json': write_json,
    'geojson': write_geojson,
}


def run(
    input_path: Path,
    out: IO[str],
    output_format: str = 'text',
    config_path: Optional[Path] = None,
    precision: Optional[int] = None,
    row_mode: Optional[bool] = None,
    split_at: Optional[int] = None,
) -> int:
    """
    Cover the geometry in ``input_path`` and write the cells to ``out``.

    Command line values override values from the config file.

    Returns:
        Number of cells written
    """
    base = load_config(config_path) if config_path else None
    options = resolve_options(base, precision=precision, row_mode=row_mode, split_at=split_at)

    geojson = load_geojson(input_path)
    items = stream(geojson, options=options)

    count = WRITERS[output_format](items, out, options.row_mode)
    logger.info("cells_written", count=count, format=output_format)
    return count


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        description='geohash-poly - geohash cells covering a polygon',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Cover a polygon with 7-character geohashes
  geohash-poly area.geojson --precision 7

  # Read from stdin, write rows as JSON
  cat area.geojson | geohash-poly - --rows --format json
        """
    )

    parser.add_argument(
        'input',
        type=Path,
        help="GeoJSON file to cover ('-' reads stdin)"
    )

    parser.add_argument(
        '--precision',
        type=int,
        default=None,
        help='Geohash length of emitted cells (default: 6)'
    )

    parser.add_argument(
        '--rows',
        action='store_true',
        default=None,
        help='Group output by row (north to south)'
    )

    parser.add_argument(
        '--split-at',
        type=int,
        default=None,
        help='Outer ring vertex count from which rows are clipped (default: 2000)'
    )

    parser.add_argument(
        '--config',
        type=Path,
        default=None,
        help='YAML file with coverage options'
    )

    parser.add_argument(
        '--format',
        choices=OUTPUT_FORMATS,
        default='text',
        help=f'Output format (default: text). Choices: {OUTPUT_FORMATS}'
    )

    parser.add_argument(
        '--output',
        type=Path,
        default=None,
        help='Output file (default: stdout)'
    )

    parser.add_argument(
        '--log-level',
        default='WARNING',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help='Logging level (default: WARNING)'
    )

    parser.add_argument(
        '--json-logs',
        action='store_true',
        help='Emit logs as JSON'
    )

    parser.add_argument(
        '--log-file',
        type=Path,
        default=None,
        help='Also write logs to this file'
    )

    args = parser.parse_args(argv)

    configure_logging(
        log_level=args.log_level,
        log_file=args.log_file,
        json_output=args.json_logs
    )

    try:
        if args.output:
            args.output.parent.mkdir(parents=True, exist_ok=True)
            with open(args.output, 'w', encoding='utf-8') as out:
                run(args.input, out, args.format, args.config,
                    args.precision, args.rows, args.split_at)
        else:
            run(args.input, sys.stdout, args.format, args.config,
                args.precision, args.rows, args.split_at)
        return 0
    except Exception as e:
        logger.error("Execution failed", error=str(e), exc_info=True)
        return 1


if __name__ == '__main__':
    sys.exit(main())
