"""Processing config validation and override merging."""

import logging
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from passmark.core.exceptions import ConfigurationError
from passmark.core.models import DEFAULT_CONFIG, ProcessingConfig, ValidationResult
from passmark.core.types import Status

logger = logging.getLogger(__name__)

_STATUS_LITERALS = tuple(status.value for status in Status)

# Fields whose errors are reported by the explicit checks below
_EXPLICITLY_CHECKED = ("grade_mapping", "custom_field_mappings")


def _as_field_dict(data: Mapping[str, Any]) -> Dict[str, Any]:
    """Re-key a raw mapping by model field name (snake or camel case in)."""
    return {ProcessingConfig.field_name_for(key) or key: value for key, value in data.items()}


def _check_grade_mapping(grade_mapping: Any) -> List[str]:
    if grade_mapping is None:
        return []
    if not isinstance(grade_mapping, Mapping):
        return ["gradeMapping must be a mapping of grade to status"]
    errors = []
    seen: Dict[str, Any] = {}
    for grade, status in grade_mapping.items():
        key = str(grade).strip().upper()
        if key in seen:
            errors.append(
                f'Grade "{grade}" collides with grade "{seen[key]}"; '
                f"grade keys are case-insensitive."
            )
        seen[key] = grade
        literal = status.value if isinstance(status, Status) else status
        if literal not in _STATUS_LITERALS:
            errors.append(
                f'Invalid status "{status}" for grade "{grade}". '
                f"Must be PASS, FAIL, or PENDING."
            )
    return errors


def _check_custom_field_mappings(names: Any) -> List[str]:
    if names is None:
        return []
    if isinstance(names, (str, bytes)) or not isinstance(names, (list, tuple)):
        return ["customFieldMappings must be a list of strings"]
    for name in names:
        if not isinstance(name, str) or not name.strip():
            return ["All custom field mappings must be non-empty strings"]
    return []


def validate_config(config: Union[ProcessingConfig, Mapping[str, Any]]) -> ValidationResult:
    """Validate a processing config without raising.

    Args:
        config: A ProcessingConfig or a raw mapping of its fields

    Returns:
        ValidationResult listing every problem found
    """
    if isinstance(config, ProcessingConfig):
        data = config.model_dump()
    else:
        data = _as_field_dict(config)

    errors = _check_grade_mapping(data.get("grade_mapping"))
    errors.extend(_check_custom_field_mappings(data.get("custom_field_mappings")))

    if not isinstance(config, ProcessingConfig):
        try:
            ProcessingConfig.model_validate(data)
        except PydanticValidationError as e:
            for error in e.errors():
                loc = [str(part) for part in error.get("loc") or ("config",)]
                loc[0] = ProcessingConfig.field_name_for(loc[0]) or loc[0]
                if loc[0] in _EXPLICITLY_CHECKED:
                    continue
                errors.append(f"{'.'.join(loc)}: {error['msg']}")

    return ValidationResult(is_valid=not errors, errors=errors)


def build_config(
    overrides: Optional[Union[ProcessingConfig, Mapping[str, Any]]] = None,
    base: ProcessingConfig = DEFAULT_CONFIG,
) -> ProcessingConfig:
    """Merge a partial override over ``base`` and validate the result.

    Args:
        overrides: Partial config, or a ProcessingConfig to re-validate
        base: Config the overrides are merged onto

    Returns:
        Validated ProcessingConfig

    Raises:
        ConfigurationError: If the merged config is invalid
    """
    if isinstance(overrides, ProcessingConfig):
        overrides = overrides.model_dump()
    if overrides is not None and not isinstance(overrides, Mapping):
        raise ConfigurationError(
            f"Invalid assessment config: expected a mapping, got {type(overrides).__name__}"
        )

    merged = base.model_dump()
    merged.update(_as_field_dict(overrides or {}))

    validation = validate_config(merged)
    if not validation.is_valid:
        logger.error(f"Rejected assessment config: {validation.errors}")
        raise ConfigurationError(
            f"Invalid assessment config: {', '.join(validation.errors)}"
        )

    return ProcessingConfig.model_validate(merged)
