"""Safety services package - scoring, recommendations and orchestration."""

from astral_crisis.services.safety.severity_aggregator import (
    DEFAULT_SEVERITY_THRESHOLDS,
    SeverityThresholds,
    calculate_severity,
)
from astral_crisis.services.safety.emergency_resources import (
    DEFAULT_EMERGENCY_CONTACTS,
    EmergencyContact,
    EmergencyContactDirectory,
)
from astral_crisis.services.safety.recommendations import (
    RecommendationGenerator,
    generate_recommendations,
)
from astral_crisis.services.safety.config_validator import validate_config
from astral_crisis.services.safety.crisis_analyzer import CrisisTextAnalyzer, analyze

__all__ = [
    # Severity
    "DEFAULT_SEVERITY_THRESHOLDS",
    "SeverityThresholds",
    "calculate_severity",
    # Emergency contacts
    "DEFAULT_EMERGENCY_CONTACTS",
    "EmergencyContact",
    "EmergencyContactDirectory",
    # Recommendations
    "RecommendationGenerator",
    "generate_recommendations",
    # Config
    "validate_config",
    # Pipeline
    "CrisisTextAnalyzer",
    "analyze",
]
