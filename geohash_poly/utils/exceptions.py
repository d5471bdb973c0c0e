"""
Custom exception hierarchy for geohash-poly.

All custom exceptions inherit from GeohashPolyError for easy catching.
"""


class GeohashPolyError(Exception):
    """Base exception for all geohash-poly errors."""
    pass


class ConfigurationError(GeohashPolyError):
    """Configuration-related errors.

    Raised when coverage options fail to load or validate.

    Example:
        >>> raise ConfigurationError("Invalid coverage options: precision must be <= 12")
    """
    pass


class DataLoadError(GeohashPolyError):
    """Data loading errors.

    Raised when GeoJSON input cannot be read or parsed.

    Example:
        >>> raise DataLoadError("Failed to load geometry: file not found")
    """
    pass


class GeometryError(GeohashPolyError):
    """Geometry input errors.

    Raised when the input is not a geometry at all (neither a shapely
    geometry nor a GeoJSON-like mapping).

    Example:
        >>> raise GeometryError("Unsupported geometry input: int")
    """
    pass


class CoverageError(GeohashPolyError):
    """Coverage computation errors.

    Raised when a row cannot be produced, e.g. because the geohash codec
    rejects a coordinate. Terminates the whole coverage operation.

    Attributes:
        stage: Name of the coverage stage that failed
        details: Dictionary with error details
    """

    def __init__(self, message: str, stage: str = None, details: dict = None):
        super().__init__(message)
        self.stage = stage
        self.details = details or {}

    def __str__(self):
        base = super().__str__()
        if self.stage:
            return f"{base} (stage={self.stage})"
        return base
