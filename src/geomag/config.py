from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import List, Optional, Union

import yaml

from geomag.exceptions import ConfigurationError
from geomag.utils.validation import validate_dict_keys, validate_range, validate_type


@dataclass
class ModelConfig:
    # IAGA coefficient file; built-in IGRF-13 when None
    coefficient_file: Optional[str] = None
    cache_size: int = 16  # Synthesised models kept per evaluator


@dataclass
class OutputConfig:
    unit: str = "nT"          # nT, uT, T, G, SI, CGS, MKS, MKSA
    angles: str = "degrees"   # or 'radians'
    precision: int = 1        # Decimal places of nT output; other units use .6e


@dataclass
class LoggingConfig:
    level: str = "WARNING"
    log_file: Optional[str] = None


@dataclass
class Config:
    """Main configuration class."""
    model: ModelConfig = field(default_factory=ModelConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Create default configuration instance
DEFAULT_CONFIG = Config()

_SECTIONS = {
    'model': ModelConfig,
    'output': OutputConfig,
    'logging': LoggingConfig,
}

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_config() -> Config:
    """Get configuration instance."""
    return DEFAULT_CONFIG


def validate_config(config: Config) -> List[str]:
    """
    Validate configuration values.
    Returns list of validation errors, empty if valid.
    """
    from geomag.models.magnetic_field import MagFluxUnit

    errors = []

    # Validate model configuration
    if not validate_type(config.model.cache_size, int) or not validate_range(config.model.cache_size, 0):
        errors.append("Cache size must be a non-negative integer")
    if config.model.coefficient_file is not None and not Path(config.model.coefficient_file).is_file():
        errors.append(f"Coefficient file not found: {config.model.coefficient_file}")

    # Validate output configuration
    try:
        MagFluxUnit.parse(config.output.unit)
    except (ValueError, AttributeError):
        errors.append(f"Unknown output unit: {config.output.unit}")
    if config.output.angles not in ("degrees", "radians"):
        errors.append("Angles must be 'degrees' or 'radians'")
    if not validate_type(config.output.precision, int) or not validate_range(config.output.precision, 0, 15):
        errors.append("Precision must be an integer between 0 and 15")

    # Validate logging configuration
    if str(config.logging.level).upper() not in _LOG_LEVELS:
        errors.append(f"Unknown logging level: {config.logging.level}")

    return errors


def load_config(config_file: Union[str, Path]) -> Config:
    """Load and validate configuration from a YAML file."""
    with open(config_file, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {config_file}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file {config_file} must contain a mapping")

    unknown = validate_dict_keys(data, _SECTIONS)
    if unknown:
        raise ConfigurationError(f"Unknown configuration sections: {', '.join(unknown)}")

    config = Config()
    for name, section_type in _SECTIONS.items():
        values = data.get(name) or {}
        if not isinstance(values, dict):
            raise ConfigurationError(f"Configuration section '{name}' must be a mapping")
        unknown = validate_dict_keys(values, (f.name for f in fields(section_type)))
        if unknown:
            raise ConfigurationError(f"Unknown keys in '{name}': {', '.join(unknown)}")
        setattr(config, name, replace(getattr(config, name), **values))

    # Validate configuration
    errors = validate_config(config)
    if errors:
        raise ConfigurationError("Configuration validation failed:\n" +
                                 "\n".join(f"- {error}" for error in errors))

    return config
