"""Domain enums package."""

from astral_crisis.domain.enums.crisis_level import (
    CrisisLevel,
    IndicatorKind,
    PatternMatchType,
)

__all__ = ["CrisisLevel", "IndicatorKind", "PatternMatchType"]
