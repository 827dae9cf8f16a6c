"""YAML processing-config parser."""

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from passmark.core.exceptions import ConfigurationError, ValidationError
from passmark.core.models import ProcessingConfig
from passmark.engines.validator import build_config, validate_config


def parse_processing_config(config_path: Union[str, Path]) -> ProcessingConfig:
    """Parse a processing config from a YAML file.

    The file holds a partial override; missing keys keep their defaults
    and an empty file yields the default config.

    Args:
        config_path: Path to config YAML file

    Returns:
        Validated ProcessingConfig

    Raises:
        ConfigurationError: If file not found or invalid YAML
        ValidationError: If the config content is invalid

    Example:
        >>> config = parse_processing_config("configs/lms_import.yaml")
        >>> config.default_to_pass_on_missing
        False
    """
    path = Path(config_path)

    if not path.exists():
        raise ConfigurationError(f"Config file not found: {path}")

    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}")
    except OSError as e:
        raise ConfigurationError(f"Failed to read {path}: {e}")

    try:
        return parse_processing_config_from_dict(data)
    except ValidationError as e:
        raise ValidationError(f"Invalid processing config in {path}:\n{e}")


def validate_config_file(config_path: Union[str, Path]) -> bool:
    """Validate a config file without raising exceptions.

    Example:
        >>> if validate_config_file("configs/lms_import.yaml"):
        ...     print("Valid config")
    """
    try:
        parse_processing_config(config_path)
        return True
    except (ConfigurationError, ValidationError):
        return False


def parse_processing_config_from_dict(data: Optional[Dict[str, Any]]) -> ProcessingConfig:
    """Parse a processing config from a dictionary of overrides.

    Raises:
        ValidationError: If the config content is invalid
    """
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValidationError(
            f"Processing config must be a mapping, got {type(data).__name__}"
        )

    validation = validate_config(data)
    if not validation.is_valid:
        raise ValidationError("\n".join(validation.errors))

    try:
        return build_config(data)
    except ConfigurationError as e:
        raise ValidationError(str(e))
