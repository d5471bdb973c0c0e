"""
Tests for custom exceptions.
"""
import pytest
from geohash_poly.utils.exceptions import (
    GeohashPolyError,
    ConfigurationError,
    DataLoadError,
    GeometryError,
    CoverageError,
)


def test_base_exception():
    """Test base exception."""
    with pytest.raises(GeohashPolyError):
        raise GeohashPolyError("Base error")


def test_configuration_error():
    """Test configuration error."""
    with pytest.raises(ConfigurationError):
        raise ConfigurationError("Invalid config")

    # Should also be catchable as base class
    with pytest.raises(GeohashPolyError):
        raise ConfigurationError("Invalid config")


def test_data_load_error():
    """Test data load error."""
    with pytest.raises(DataLoadError):
        raise DataLoadError("File not found")


def test_geometry_error():
    """Test geometry error."""
    with pytest.raises(GeometryError):
        raise GeometryError("Unsupported geometry input")


def test_coverage_error_with_stage():
    """Test coverage error with stage information."""
    error = CoverageError(
        "Row failed",
        stage="row",
        details={'error_type': 'ValueError'}
    )

    assert error.stage == "row"
    assert error.details['error_type'] == 'ValueError'
    assert "stage=row" in str(error)


def test_coverage_error_without_stage():
    """Test coverage error defaults."""
    error = CoverageError("Row failed")

    assert error.stage is None
    assert error.details == {}
    assert str(error) == "Row failed"


def test_exception_inheritance():
    """Test that all custom exceptions inherit from base."""
    exceptions = [
        ConfigurationError,
        DataLoadError,
        GeometryError,
        CoverageError,
    ]

    for exc_class in exceptions:
        assert issubclass(exc_class, GeohashPolyError)
