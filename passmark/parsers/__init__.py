"""Processing config parsers."""

from .yaml_parser import (
    parse_processing_config,
    parse_processing_config_from_dict,
    validate_config_file,
)

__all__ = [
    "parse_processing_config",
    "validate_config_file",
    "parse_processing_config_from_dict",
]
