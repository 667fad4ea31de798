"""
Configuration Validator

Normalizes partial or untrusted configuration into a complete,
bounds-checked CrisisDetectionConfig.

SAFETY-CRITICAL: Never raises. A user in crisis must get a
classification even when the caller passes a broken config.
Out-of-range numbers are clamped; unusable values fall back to
the documented defaults.
"""

import math
from typing import Any, Mapping, Optional, Union

from pydantic.alias_generators import to_camel

from astral_crisis.config.logging_config import get_logger
from astral_crisis.domain.models.detection_config import (
    CONFIDENCE_THRESHOLD_RANGE,
    DEFAULT_CRISIS_CONFIG,
    MAX_ANALYSIS_LENGTH_RANGE,
    SEVERITY_THRESHOLD_RANGE,
    CrisisDetectionConfig,
)

logger = get_logger(__name__)


BOOLEAN_FIELDS: tuple[str, ...] = (
    "enable_keyword_detection",
    "enable_sentiment_analysis",
    "enable_pattern_matching",
)

# field -> (minimum, maximum, integral)
NUMERIC_FIELDS: dict[str, tuple[float, float, bool]] = {
    "severity_threshold": (*SEVERITY_THRESHOLD_RANGE, False),
    "confidence_threshold": (*CONFIDENCE_THRESHOLD_RANGE, False),
    "max_analysis_length": (*MAX_ANALYSIS_LENGTH_RANGE, True),
}

_TRUE_STRINGS = frozenset({"true", "1", "yes", "on"})
_FALSE_STRINGS = frozenset({"false", "0", "no", "off"})

_INT_LIMIT = 10**9


def validate_config(
    partial: Union[CrisisDetectionConfig, Mapping[str, Any], None] = None,
) -> CrisisDetectionConfig:
    """
    Build a complete detection config from partial input.

    Keys may be snake_case or camelCase (``maxAnalysisLength``).
    Unknown keys are ignored.

    Args:
        partial: Partial mapping, an existing config, or None

    Returns:
        Fully-populated, bounds-checked config
    """
    if isinstance(partial, CrisisDetectionConfig):
        return partial
    if not isinstance(partial, Mapping) or not partial:
        return DEFAULT_CRISIS_CONFIG

    values: dict[str, Any] = {}

    for name in BOOLEAN_FIELDS:
        raw = _lookup(partial, name)
        default = getattr(DEFAULT_CRISIS_CONFIG, name)
        values[name] = default if raw is None else _coerce_bool(name, raw, default)

    for name, (minimum, maximum, integral) in NUMERIC_FIELDS.items():
        raw = _lookup(partial, name)
        default = getattr(DEFAULT_CRISIS_CONFIG, name)
        if raw is None:
            values[name] = default
            continue
        values[name] = _clamp_number(name, raw, default, minimum, maximum, integral)

    return CrisisDetectionConfig(**values)


def _lookup(partial: Mapping[str, Any], name: str) -> Any:
    """Read a field by snake_case name, then by camelCase alias."""
    if name in partial:
        return partial[name]
    return partial.get(to_camel(name))


def _coerce_bool(name: str, raw: Any, default: bool) -> bool:
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, (int, float)):
        return raw != 0
    if isinstance(raw, str):
        lowered = raw.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False

    logger.warning(
        "Unusable detection config value, using default",
        field=name,
        value_type=type(raw).__name__,
        applied=default,
    )
    return default


def _clamp_number(
    name: str,
    raw: Any,
    default: float,
    minimum: float,
    maximum: float,
    integral: bool,
) -> float:
    number = _to_number(raw)
    if number is None:
        logger.warning(
            "Unusable detection config value, using default",
            field=name,
            value_type=type(raw).__name__,
            applied=default,
        )
        return default

    clamped = max(minimum, min(maximum, number))
    if integral:
        clamped = int(clamped)

    if clamped != number:
        logger.warning(
            "Detection config value clamped",
            field=name,
            requested=number,
            applied=clamped,
        )

    return clamped


def _to_number(raw: Any) -> Optional[float]:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        # float() overflows on arbitrarily large ints
        return float(max(-_INT_LIMIT, min(_INT_LIMIT, raw)))
    if isinstance(raw, float):
        number = raw
    elif isinstance(raw, str):
        try:
            number = float(raw.strip())
        except (OverflowError, ValueError):
            return None
    else:
        return None

    if math.isnan(number):
        return None
    return number
