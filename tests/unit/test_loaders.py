"""
Tests for GeoJSON loading.
"""
import io
import json

import pytest
from pathlib import Path
from geohash_poly.data.loaders import load_geojson
from geohash_poly.utils.exceptions import DataLoadError


SQUARE = {
    'type': 'Polygon',
    'coordinates': [[[0, 0], [0, 1], [1, 1], [1, 0], [0, 0]]],
}


@pytest.fixture
def geojson_file(tmp_path):
    """Temporary GeoJSON file holding the unit square."""
    path = tmp_path / "square.geojson"
    path.write_text(json.dumps(SQUARE))
    return path


def test_load_file(geojson_file):
    """Test loading a GeoJSON file."""
    assert load_geojson(geojson_file) == SQUARE


def test_load_stdin(monkeypatch):
    """Test '-' reads from stdin."""
    monkeypatch.setattr('sys.stdin', io.StringIO(json.dumps(SQUARE)))
    assert load_geojson(Path('-')) == SQUARE


def test_file_not_found():
    """Test missing file raises DataLoadError."""
    with pytest.raises(DataLoadError):
        load_geojson(Path("data/missing.geojson"))


def test_invalid_json(tmp_path):
    """Test unparseable content raises DataLoadError."""
    path = tmp_path / "broken.geojson"
    path.write_text("{'type': ")

    with pytest.raises(DataLoadError) as exc_info:
        load_geojson(path)

    assert "Failed to parse" in str(exc_info.value)


def test_invalid_stdin(monkeypatch):
    """Test unparseable stdin raises DataLoadError."""
    monkeypatch.setattr('sys.stdin', io.StringIO("not json"))

    with pytest.raises(DataLoadError):
        load_geojson(Path('-'))


def test_document_not_object(tmp_path):
    """Test a JSON array is rejected."""
    path = tmp_path / "array.geojson"
    path.write_text("[1, 2, 3]")

    with pytest.raises(DataLoadError):
        load_geojson(path)
