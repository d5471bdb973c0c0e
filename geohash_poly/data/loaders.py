"""
GeoJSON loading for the command line tool.

Reads a GeoJSON document from a file or stdin, with error handling that
maps I/O and parse failures onto DataLoadError.
"""
import json
import sys
from pathlib import Path
from typing import Any, Dict

from geohash_poly.utils.exceptions import DataLoadError
from geohash_poly.utils.logging_config import get_logger

logger = get_logger(__name__)

STDIN = '-'


def load_geojson(file_path: Path) -> Dict[str, Any]:
    """
    Load a GeoJSON document.

    Args:
        file_path: Path to a GeoJSON file, or ``-`` to read stdin

    Returns:
        The parsed GeoJSON mapping (Polygon, MultiPolygon, Feature or
        FeatureCollection)

    Raises:
        DataLoadError: If the file is missing, unreadable, not JSON, or not
            a JSON object

    Example:
        >>> from pathlib import Path
        >>> geojson = load_geojson(Path("data/dublin.geojson"))
        >>> geojson['type']
        'Polygon'
    """
    if str(file_path) == STDIN:
        source = "<stdin>"
        try:
            document = json.load(sys.stdin)
        except json.JSONDecodeError as e:
            raise DataLoadError(f"Failed to parse GeoJSON from stdin: {e}") from e
    else:
        source = str(file_path)
        if not file_path.exists():
            raise DataLoadError(f"GeoJSON file not found: {file_path}")

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                document = json.load(f)
        except json.JSONDecodeError as e:
            raise DataLoadError(f"Failed to parse GeoJSON file {file_path}: {e}") from e
        except OSError as e:
            raise DataLoadError(f"Failed to read GeoJSON file {file_path}: {e}") from e

    if not isinstance(document, dict):
        raise DataLoadError(
            f"GeoJSON document must be an object, got {type(document).__name__}"
        )

    logger.info("geojson_loaded", source=source, type=document.get('type'))
    return document
