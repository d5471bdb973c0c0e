"""
Configuration management using Pydantic for validation.

This module provides type-safe loading and validation of coverage
options, either from keyword arguments or from a YAML file.
"""
from pathlib import Path
from typing import Any, Dict, Mapping, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from geohash_poly.utils.exceptions import ConfigurationError


class CoverageOptions(BaseModel):
    """
    Parameters for a polygon coverage run.

    The camelCase names (``rowMode``, ``splitAt``, ``rowBuffer``) are
    accepted as aliases of the snake_case fields.

    Example:
        >>> options = CoverageOptions(precision=7, splitAt=500)
        >>> options.split_at
        500
    """
    model_config = ConfigDict(populate_by_name=True, extra='forbid', frozen=True)

    precision: int = Field(6, ge=1, le=12, description="Geohash length of emitted cells")
    row_mode: bool = Field(False, alias='rowMode', description="Emit whole rows instead of single cells")
    split_at: int = Field(
        2000, ge=4, alias='splitAt',
        description="Outer ring vertex count from which each row is clipped before testing"
    )
    row_buffer: float = Field(
        0.0002, ge=0.0, alias='rowBuffer',
        description="Padding (degrees) around the clipping band of a row"
    )


OptionsLike = Union[CoverageOptions, Mapping[str, Any], None]


def resolve_options(options: OptionsLike = None, **overrides) -> CoverageOptions:
    """
    Merge an options object or mapping with keyword overrides.

    Args:
        options: Existing CoverageOptions, a plain mapping, or None for defaults
        **overrides: Individual option values; ``None`` values are ignored

    Returns:
        Validated CoverageOptions

    Raises:
        ConfigurationError: If the merged options fail validation

    Example:
        >>> resolve_options({'precision': 5}, row_mode=True).row_mode
        True
    """
    if options is not None and not isinstance(options, (CoverageOptions, Mapping)):
        raise ConfigurationError(
            f"Coverage options must be a mapping or CoverageOptions, got {type(options).__name__}"
        )

    try:
        if options is None:
            base = get_default_config()
        elif isinstance(options, CoverageOptions):
            base = options
        else:
            # Validate first so camelCase keys become field names before overriding
            base = CoverageOptions(**options)

        values: Dict[str, Any] = base.model_dump()
        aliases = {
            field.alias: name
            for name, field in CoverageOptions.model_fields.items() if field.alias
        }
        values.update({aliases.get(k, k): v for k, v in overrides.items() if v is not None})
        return CoverageOptions(**values)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid coverage options: {e}") from e


def load_config(config_path: Path) -> CoverageOptions:
    """
    Load and validate coverage options from YAML file.

    Args:
        config_path: Path to YAML config file

    Returns:
        Validated CoverageOptions object

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If YAML is malformed
        ConfigurationError: If the document is not a mapping or fails validation

    Example:
        >>> options = load_config(Path("config/coverage.yaml"))
        >>> print(options.precision, options.split_at)
        7 2000
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r') as f:
        config_dict = yaml.safe_load(f)

    if config_dict is None:
        config_dict = {}
    if not isinstance(config_dict, dict):
        raise ConfigurationError(f"Config file must contain a mapping: {config_path}")

    return resolve_options(config_dict)


def get_default_config() -> CoverageOptions:
    """
    Get default coverage options.

    Returns:
        Default CoverageOptions
    """
    return CoverageOptions()
