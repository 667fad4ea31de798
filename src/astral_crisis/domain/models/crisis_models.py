"""
Crisis Models

Value objects produced by the crisis text analysis engine.

SAFETY-CRITICAL: Results may drive crisis banners and escalation
prompts in display layers. All objects here are immutable once built;
display code must never mutate a result.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional

from astral_crisis.domain.enums.crisis_level import CrisisLevel, IndicatorKind
from astral_crisis.domain.models.detection_config import CrisisDetectionConfig


MIN_INDICATOR_SEVERITY = 0
MAX_INDICATOR_SEVERITY = 10


@dataclass(frozen=True)
class CrisisIndicator:
    """
    One piece of evidence found in the analyzed text.

    Range checks run here, when the detector builds the indicator.
    The severity aggregator trusts these values.

    Attributes:
        kind: Detector family (keyword or pattern)
        severity: Static weight assigned by the detector (0-10)
        confidence: Detector certainty (0.0-1.0)
        description: Human-readable label
        details: Detector metadata (category key, matched phrases,
            pattern source, match type). Read by the recommendation
            generator only, never by scoring.
    """

    kind: IndicatorKind
    severity: int
    confidence: float
    description: str
    details: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        if not MIN_INDICATOR_SEVERITY <= self.severity <= MAX_INDICATOR_SEVERITY:
            raise ValueError(
                f"Indicator severity must be "
                f"{MIN_INDICATOR_SEVERITY}-{MAX_INDICATOR_SEVERITY}, got {self.severity}"
            )
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(
                f"Indicator confidence must be 0.0-1.0, got {self.confidence}"
            )
        object.__setattr__(self, "details", MappingProxyType(dict(self.details)))

    @property
    def category(self) -> Optional[str]:
        """Keyword category key, if the detector recorded one."""
        return self.details.get("category")

    def weighted_severity(self) -> float:
        """Contribution of this indicator to the severity score."""
        return self.severity * self.confidence

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "severity": self.severity,
            "confidence": round(self.confidence, 3),
            "description": self.description,
            "details": {
                key: list(value) if isinstance(value, tuple) else value
                for key, value in self.details.items()
            },
        }


@dataclass(frozen=True)
class SeverityAssessment:
    """Aggregated severity for one analysis."""

    level: CrisisLevel
    score: float
    confidence: float

    def to_dict(self) -> dict:
        return {
            "level": self.level.value,
            "score": self.score,
            "confidence": self.confidence,
        }


@dataclass(frozen=True)
class AnalysisMetadata:
    """
    Bookkeeping attached to every result.

    Attributes:
        analysis_time_ms: Wall-clock duration of the analysis
        text_length: Characters analyzed after truncation
        config: Normalized configuration the detectors ran with
        severity_score: Raw numeric score behind the level
    """

    analysis_time_ms: float
    text_length: int
    config: CrisisDetectionConfig
    severity_score: float = 0.0

    def to_dict(self) -> dict:
        return {
            "analysis_time_ms": round(self.analysis_time_ms, 3),
            "text_length": self.text_length,
            "config": self.config.to_dict(),
            "severity_score": self.severity_score,
        }


@dataclass(frozen=True)
class CrisisDetectionResult:
    """
    The engine's sole output.

    ARCHITECTURE: Display layers render this; they do not feed it back
    into the engine or modify it.

    Attributes:
        level: Aggregated crisis classification
        confidence: Mean indicator confidence (0.0-1.0)
        indicators: Keyword indicators first, then pattern indicators
        recommendations: Ordered, human-readable actions
        metadata: Timing, effective length, config and raw score
    """

    level: CrisisLevel
    confidence: float
    indicators: tuple[CrisisIndicator, ...]
    recommendations: tuple[str, ...]
    metadata: AnalysisMetadata

    @property
    def score(self) -> float:
        """Raw severity score behind ``level``."""
        return self.metadata.severity_score

    @property
    def requires_intervention(self) -> bool:
        """Whether the level calls for urgent human follow-up."""
        return self.level.is_at_least(CrisisLevel.HIGH)

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "level": self.level.value,
            "confidence": self.confidence,
            "indicators": [i.to_dict() for i in self.indicators],
            "recommendations": list(self.recommendations),
            "metadata": self.metadata.to_dict(),
        }
