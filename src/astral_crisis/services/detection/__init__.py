"""Detection services package."""

from astral_crisis.services.detection.detector_interface import CrisisIndicatorDetector
from astral_crisis.services.detection.keyword_lexicon import (
    CRISIS_KEYWORDS,
    CrisisKeywordCategory,
)
from astral_crisis.services.detection.keyword_detector import (
    KeywordCrisisDetector,
    detect_keywords,
)
from astral_crisis.services.detection.pattern_detector import (
    CRISIS_PATTERN_FAMILIES,
    PatternCrisisDetector,
    PatternFamily,
    detect_patterns,
)

__all__ = [
    # Interface
    "CrisisIndicatorDetector",
    # Keyword detection
    "CRISIS_KEYWORDS",
    "CrisisKeywordCategory",
    "KeywordCrisisDetector",
    "detect_keywords",
    # Pattern detection
    "CRISIS_PATTERN_FAMILIES",
    "PatternCrisisDetector",
    "PatternFamily",
    "detect_patterns",
]
