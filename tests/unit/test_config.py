"""
Tests for configuration management.
"""
import pytest
from pathlib import Path
from pydantic import ValidationError
from geohash_poly.utils.config import (
    load_config,
    resolve_options,
    CoverageOptions,
    get_default_config,
)
from geohash_poly.utils.exceptions import ConfigurationError


def test_default_options():
    """Test default coverage options."""
    options = get_default_config()

    assert options.precision == 6
    assert options.row_mode is False
    assert options.split_at == 2000
    assert options.row_buffer == pytest.approx(0.0002)


def test_camel_case_aliases():
    """Test original option names are accepted."""
    options = CoverageOptions(precision=7, rowMode=True, splitAt=500, rowBuffer=0.001)

    assert options.row_mode is True
    assert options.split_at == 500
    assert options.row_buffer == 0.001


def test_precision_validation():
    """Test precision must be within 1..12."""
    assert CoverageOptions(precision=12).precision == 12

    with pytest.raises(ValidationError):
        CoverageOptions(precision=0)

    with pytest.raises(ValidationError):
        CoverageOptions(precision=13)


def test_split_at_validation():
    """Test split_at must be a usable ring size."""
    with pytest.raises(ValidationError):
        CoverageOptions(split_at=2)


def test_unknown_option_rejected():
    """Test misspelled options are not silently ignored."""
    with pytest.raises(ValidationError):
        CoverageOptions(precission=5)


def test_resolve_options_merges_overrides():
    """Test keyword overrides win over the base options."""
    base = CoverageOptions(precision=5, row_mode=True)
    options = resolve_options(base, precision=8, split_at=None)

    assert options.precision == 8
    assert options.row_mode is True
    assert options.split_at == 2000


def test_resolve_options_from_mapping():
    """Test plain mappings are accepted."""
    options = resolve_options({'precision': 3, 'splitAt': 100})

    assert options.precision == 3
    assert options.split_at == 100


def test_resolve_options_defaults():
    """Test no options and no overrides gives the default config."""
    assert resolve_options() == get_default_config()


def test_resolve_options_camel_case_base_with_override():
    """Test a snake_case override wins over a camelCase mapping key."""
    options = resolve_options({'rowMode': True, 'splitAt': 100}, row_mode=False)

    assert options.row_mode is False
    assert options.split_at == 100


def test_resolve_options_camel_case_override():
    """Test camelCase keyword overrides are accepted."""
    options = resolve_options(CoverageOptions(split_at=100), splitAt=50)

    assert options.split_at == 50


def test_resolve_options_invalid():
    """Test validation failures become ConfigurationError."""
    with pytest.raises(ConfigurationError):
        resolve_options(precision=20)

    with pytest.raises(ConfigurationError):
        resolve_options(["precision", 5])


def test_load_config(tmp_path):
    """Test loading options from YAML."""
    config_file = tmp_path / "coverage.yaml"
    config_file.write_text("precision: 7\nsplitAt: 1000\nrow_mode: true\n")

    options = load_config(config_file)

    assert options.precision == 7
    assert options.split_at == 1000
    assert options.row_mode is True


def test_load_empty_config(tmp_path):
    """Test an empty YAML file gives defaults."""
    config_file = tmp_path / "empty.yaml"
    config_file.write_text("")

    assert load_config(config_file) == CoverageOptions()


def test_config_not_a_mapping(tmp_path):
    """Test a YAML list is rejected."""
    config_file = tmp_path / "list.yaml"
    config_file.write_text("- 7\n- 8\n")

    with pytest.raises(ConfigurationError):
        load_config(config_file)


def test_config_file_not_found():
    """Test error handling when config file doesn't exist."""
    with pytest.raises(FileNotFoundError):
        load_config(Path("config/nonexistent.yaml"))
