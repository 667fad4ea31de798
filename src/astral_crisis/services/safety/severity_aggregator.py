"""
Severity Aggregator

Combines indicators into a crisis level, score and confidence.

SAFETY-CRITICAL: Level boundaries are discrete policy values.
They are not driven by CrisisDetectionConfig.severity_threshold.

ARCHITECTURE: Pure function of the indicator list. Order of the
indicators does not change the outcome.
"""

from dataclasses import dataclass
from typing import Iterable

from astral_crisis.domain.enums.crisis_level import CrisisLevel
from astral_crisis.domain.models.crisis_models import CrisisIndicator, SeverityAssessment


@dataclass(frozen=True)
class SeverityThresholds:
    """
    Minimum score for each level, checked top-down.

    Each boundary is inclusive: a score equal to ``high`` is HIGH.
    Anything below ``low`` is NONE.

    CLINICAL_VALIDATION_REQUIRED
    """

    immediate: float = 25.0
    high: float = 15.0
    moderate: float = 8.0
    low: float = 3.0

    def classify(self, score: float) -> CrisisLevel:
        """Map a severity score to a crisis level."""
        if score >= self.immediate:
            return CrisisLevel.IMMEDIATE
        elif score >= self.high:
            return CrisisLevel.HIGH
        elif score >= self.moderate:
            return CrisisLevel.MODERATE
        elif score >= self.low:
            return CrisisLevel.LOW
        return CrisisLevel.NONE

    def to_dict(self) -> dict:
        return {
            "immediate": self.immediate,
            "high": self.high,
            "moderate": self.moderate,
            "low": self.low,
        }


DEFAULT_SEVERITY_THRESHOLDS = SeverityThresholds()

NO_SEVERITY = SeverityAssessment(level=CrisisLevel.NONE, score=0.0, confidence=0.0)


def calculate_severity(
    indicators: Iterable[CrisisIndicator],
    thresholds: SeverityThresholds = DEFAULT_SEVERITY_THRESHOLDS,
) -> SeverityAssessment:
    """
    Aggregate indicators into a severity assessment.

    score = sum(severity * confidence), rounded to 2 places.
    confidence = mean(confidence), rounded to 2 places.
    The level is classified from the rounded score so that the
    reported score and level always agree.

    Args:
        indicators: Indicators from all detectors
        thresholds: Level boundaries

    Returns:
        SeverityAssessment (NONE with zero score for no indicators)
    """
    indicators = list(indicators)
    if not indicators:
        return NO_SEVERITY

    total_score = sum(i.weighted_severity() for i in indicators)
    mean_confidence = sum(i.confidence for i in indicators) / len(indicators)

    score = round(total_score, 2)
    return SeverityAssessment(
        level=thresholds.classify(score),
        score=score,
        confidence=round(mean_confidence, 2),
    )
