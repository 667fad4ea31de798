"""
Astral Crisis Domain Layer

Value objects and enums shared by detectors, the severity aggregator
and the recommendation generator.
"""

from astral_crisis.domain.enums.crisis_level import (
    CrisisLevel,
    IndicatorKind,
    PatternMatchType,
)
from astral_crisis.domain.models.detection_config import (
    CrisisDetectionConfig,
    DEFAULT_CRISIS_CONFIG,
)
from astral_crisis.domain.models.crisis_models import (
    AnalysisMetadata,
    CrisisDetectionResult,
    CrisisIndicator,
    SeverityAssessment,
)

__all__ = [
    # Enums
    "CrisisLevel",
    "IndicatorKind",
    "PatternMatchType",
    # Configuration
    "CrisisDetectionConfig",
    "DEFAULT_CRISIS_CONFIG",
    # Results
    "AnalysisMetadata",
    "CrisisDetectionResult",
    "CrisisIndicator",
    "SeverityAssessment",
]
