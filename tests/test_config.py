import pytest

from geomag.config import Config, get_config, load_config, validate_config
from geomag.exceptions import ConfigurationError


def write(tmp_path, text):
    path = tmp_path / "geomag.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults():
    config = get_config()
    assert config.model.coefficient_file is None
    assert config.model.cache_size == 16
    assert config.output.unit == "nT"
    assert config.output.angles == "degrees"
    assert config.output.precision == 1
    assert config.logging.level == "WARNING"
    assert validate_config(config) == []


def test_sections_are_independent():
    a, b = Config(), Config()
    a.output.unit = "G"
    assert b.output.unit == "nT"


def test_load(tmp_path):
    coefficients = tmp_path / "igrf13coeffs.txt"
    coefficients.write_text("", encoding="utf-8")
    path = write(tmp_path, f"""
model:
  coefficient_file: {coefficients}
  cache_size: 4
output:
  unit: uT
  angles: radians
logging:
  level: debug
""")
    config = load_config(path)
    assert config.model.coefficient_file == str(coefficients)
    assert config.model.cache_size == 4
    assert config.output.unit == "uT"
    assert config.output.angles == "radians"
    assert config.output.precision == 1
    assert config.logging.level == "debug"


def test_load_empty_file(tmp_path):
    config = load_config(write(tmp_path, ""))
    assert config.output.unit == "nT"


def test_empty_section(tmp_path):
    config = load_config(write(tmp_path, "output:\n"))
    assert config.output.unit == "nT"


@pytest.mark.parametrize("text, message", [
    ("- model\n", "mapping"),
    ("output: [unit: nT\n", "Invalid YAML"),
    ("output: nT\n", "'output' must be a mapping"),
    ("plots:\n  enabled: true\n", "Unknown configuration sections: plots"),
    ("output:\n  colour: red\n", "Unknown keys in 'output': colour"),
    ("output:\n  unit: furlong\n", "Unknown output unit"),
    ("output:\n  angles: grads\n", "Angles"),
    ("output:\n  precision: 20\n", "Precision"),
    ("model:\n  cache_size: -1\n", "Cache size"),
    ("model:\n  coefficient_file: /nonexistent/igrf.txt\n", "not found"),
    ("logging:\n  level: loud\n", "logging level"),
])
def test_invalid(tmp_path, text, message):
    with pytest.raises(ConfigurationError, match=message):
        load_config(write(tmp_path, text))


def test_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_config(tmp_path / "missing.yaml")
