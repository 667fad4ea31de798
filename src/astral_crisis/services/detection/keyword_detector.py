"""
Keyword Crisis Detector

Case-insensitive substring scan against the weighted keyword lexicon.
Emits at most one indicator per category per call.
"""

from typing import Optional

from astral_crisis.config.logging_config import get_logger
from astral_crisis.domain.enums.crisis_level import IndicatorKind
from astral_crisis.domain.models.crisis_models import (
    MAX_INDICATOR_SEVERITY,
    MIN_INDICATOR_SEVERITY,
    CrisisIndicator,
)
from astral_crisis.domain.models.detection_config import (
    CrisisDetectionConfig,
    DEFAULT_CRISIS_CONFIG,
)
from astral_crisis.services.detection.detector_interface import (
    CrisisIndicatorDetector,
    normalize_for_matching,
)
from astral_crisis.services.detection.keyword_lexicon import (
    CRISIS_KEYWORDS,
    CrisisKeywordCategory,
    is_weight_ordered,
)

logger = get_logger(__name__)


class KeywordCrisisDetector(CrisisIndicatorDetector):
    """
    Lexicon-based crisis detector.

    Confidence grows with the number of distinct phrases from the same
    category: 0.5 + 0.1 per phrase, capped at 0.9. Severity is the
    category weight regardless of how many phrases matched.

    Usage:
        detector = KeywordCrisisDetector()
        indicators = detector.detect(text, config)
    """

    name = "keyword"

    BASE_CONFIDENCE: float = 0.5
    CONFIDENCE_PER_MATCH: float = 0.1
    MAX_CONFIDENCE: float = 0.9

    def __init__(
        self,
        categories: Optional[tuple[CrisisKeywordCategory, ...]] = None,
    ) -> None:
        """
        Initialize detector.

        Args:
            categories: Lexicon to scan. Defaults to CRISIS_KEYWORDS.

        Raises:
            ValueError: If weights are out of range or increase
                between consecutive categories
        """
        self.categories = tuple(categories) if categories is not None else CRISIS_KEYWORDS

        for category in self.categories:
            if not MIN_INDICATOR_SEVERITY <= category.weight <= MAX_INDICATOR_SEVERITY:
                raise ValueError(
                    f"Category '{category.key}' weight must be "
                    f"{MIN_INDICATOR_SEVERITY}-{MAX_INDICATOR_SEVERITY}, got {category.weight}"
                )
        if not is_weight_ordered(self.categories):
            raise ValueError("Keyword categories must be declared in non-increasing weight order")

        # Phrases are matched against lowercased text
        self._normalized_keywords = tuple(
            tuple(keyword.lower() for keyword in category.keywords)
            for category in self.categories
        )

    def is_enabled(self, config: CrisisDetectionConfig) -> bool:
        return config.enable_keyword_detection

    def scan(self, text: str) -> list[CrisisIndicator]:
        normalized_text = normalize_for_matching(text)
        indicators: list[CrisisIndicator] = []

        for category, keywords in zip(self.categories, self._normalized_keywords):
            matches = tuple(keyword for keyword in keywords if keyword in normalized_text)
            if not matches:
                continue

            indicators.append(CrisisIndicator(
                kind=IndicatorKind.KEYWORD,
                severity=category.weight,
                confidence=self._confidence_for(len(matches)),
                description=category.description,
                details={
                    "category": category.key,
                    "matched_keywords": matches,
                    "category_weight": category.weight,
                },
            ))

        if indicators:
            logger.debug(
                "Keyword indicators detected",
                categories=[i.category for i in indicators],
            )

        return indicators

    def _confidence_for(self, match_count: int) -> float:
        """Confidence for a category with ``match_count`` distinct hits."""
        confidence = self.BASE_CONFIDENCE + self.CONFIDENCE_PER_MATCH * match_count
        return round(min(self.MAX_CONFIDENCE, confidence), 2)


_default_detector = KeywordCrisisDetector()


def detect_keywords(
    text: str,
    config: CrisisDetectionConfig = DEFAULT_CRISIS_CONFIG,
) -> list[CrisisIndicator]:
    """
    Scan text against the default lexicon.

    Args:
        text: Text to analyze (empty or non-string yields no indicators)
        config: Normalized detection config

    Returns:
        At most one indicator per keyword category
    """
    return _default_detector.detect(text, config)
