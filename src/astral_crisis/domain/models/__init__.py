"""Domain models package."""

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
    # Configuration
    "CrisisDetectionConfig",
    "DEFAULT_CRISIS_CONFIG",
    # Results
    "AnalysisMetadata",
    "CrisisDetectionResult",
    "CrisisIndicator",
    "SeverityAssessment",
]
