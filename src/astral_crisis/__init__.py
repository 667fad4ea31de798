"""
Astral Crisis - Crisis Text Analysis Engine

Scans free-form user text for self-harm and suicide risk language,
aggregates the evidence into a crisis level with a confidence score,
and produces intervention recommendations.

IMPORTANT: This is a screening aid, not a substitute for clinical
judgment. It classifies and recommends; it never escalates.

Usage:
    from astral_crisis import analyze

    result = analyze(message_text)
    if result.requires_intervention:
        ...
"""

__version__ = "0.1.0"

from astral_crisis.domain import (
    AnalysisMetadata,
    CrisisDetectionConfig,
    CrisisDetectionResult,
    CrisisIndicator,
    CrisisLevel,
    DEFAULT_CRISIS_CONFIG,
    IndicatorKind,
    PatternMatchType,
    SeverityAssessment,
)
from astral_crisis.services.detection import (
    CRISIS_KEYWORDS,
    CRISIS_PATTERN_FAMILIES,
    CrisisIndicatorDetector,
    CrisisKeywordCategory,
    KeywordCrisisDetector,
    PatternCrisisDetector,
    PatternFamily,
    detect_keywords,
    detect_patterns,
)
from astral_crisis.services.safety import (
    DEFAULT_EMERGENCY_CONTACTS,
    DEFAULT_SEVERITY_THRESHOLDS,
    CrisisTextAnalyzer,
    EmergencyContact,
    EmergencyContactDirectory,
    RecommendationGenerator,
    SeverityThresholds,
    analyze,
    calculate_severity,
    generate_recommendations,
    validate_config,
)

__all__ = [
    "__version__",
    # Operations
    "analyze",
    "detect_keywords",
    "detect_patterns",
    "calculate_severity",
    "generate_recommendations",
    "validate_config",
    # Domain
    "AnalysisMetadata",
    "CrisisDetectionConfig",
    "CrisisDetectionResult",
    "CrisisIndicator",
    "CrisisLevel",
    "DEFAULT_CRISIS_CONFIG",
    "IndicatorKind",
    "PatternMatchType",
    "SeverityAssessment",
    # Detection
    "CRISIS_KEYWORDS",
    "CRISIS_PATTERN_FAMILIES",
    "CrisisIndicatorDetector",
    "CrisisKeywordCategory",
    "KeywordCrisisDetector",
    "PatternCrisisDetector",
    "PatternFamily",
    # Safety pipeline
    "CrisisTextAnalyzer",
    "DEFAULT_EMERGENCY_CONTACTS",
    "DEFAULT_SEVERITY_THRESHOLDS",
    "EmergencyContact",
    "EmergencyContactDirectory",
    "RecommendationGenerator",
    "SeverityThresholds",
]
