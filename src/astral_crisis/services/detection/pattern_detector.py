"""
Pattern Crisis Detector

Regular-expression detectors for higher-specificity phrasing:
method inquiries, goodbye messages and time-bound threats.

CLINICAL_REVIEW_REQUIRED: Patterns and their fixed severity and
confidence values need clinical validation.
"""

import re
from dataclasses import dataclass
from typing import Optional

from astral_crisis.config.logging_config import get_logger
from astral_crisis.domain.enums.crisis_level import IndicatorKind, PatternMatchType
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

logger = get_logger(__name__)


@dataclass(frozen=True)
class PatternFamily:
    """
    A named group of patterns sharing one severity and confidence.

    Every matching pattern emits its own indicator; families are not
    collapsed to one indicator the way keyword categories are.
    """

    match_type: PatternMatchType
    description: str
    severity: int
    confidence: float
    patterns: tuple[re.Pattern, ...]


CRISIS_PATTERN_FAMILIES: tuple[PatternFamily, ...] = (
    PatternFamily(
        match_type=PatternMatchType.METHOD_INQUIRY,
        description="Searching for harmful methods",
        severity=9,
        confidence=0.85,
        patterns=(
            re.compile(r"how to (kill|hurt|harm|end)", re.IGNORECASE),
            re.compile(r"ways to (die|suicide|end it)", re.IGNORECASE),
            re.compile(r"methods of (suicide|self.harm)", re.IGNORECASE),
        ),
    ),
    PatternFamily(
        match_type=PatternMatchType.GOODBYE_MESSAGE,
        description="Potential goodbye message",
        severity=10,
        confidence=0.90,
        patterns=(
            re.compile(r"goodbye.{0,20}(everyone|world|cruel)", re.IGNORECASE),
            re.compile(r"this is.{0,10}goodbye", re.IGNORECASE),
            re.compile(r"final.{0,10}(message|words)", re.IGNORECASE),
        ),
    ),
    PatternFamily(
        match_type=PatternMatchType.TIME_REFERENCE,
        description="Time-specific crisis reference",
        severity=8,
        confidence=0.80,
        patterns=(
            re.compile(r"tonight.{0,20}(end|over|done)", re.IGNORECASE),
            re.compile(r"by (tomorrow|morning).{0,20}(gone|dead)", re.IGNORECASE),
            re.compile(r"won't be here.{0,20}(long|tomorrow)", re.IGNORECASE),
        ),
    ),
)


class PatternCrisisDetector(CrisisIndicatorDetector):
    """
    Regex-based crisis detector.

    Families are evaluated independently and exhaustively, in
    declaration order, so one text may trigger several families.

    Usage:
        detector = PatternCrisisDetector()
        indicators = detector.detect(text, config)
    """

    name = "pattern"

    def __init__(
        self,
        families: Optional[tuple[PatternFamily, ...]] = None,
    ) -> None:
        """
        Initialize detector.

        Args:
            families: Pattern families to run. Defaults to
                CRISIS_PATTERN_FAMILIES.

        Raises:
            ValueError: If a family's severity or confidence is out of range
        """
        self.families = tuple(families) if families is not None else CRISIS_PATTERN_FAMILIES

        for family in self.families:
            if not MIN_INDICATOR_SEVERITY <= family.severity <= MAX_INDICATOR_SEVERITY:
                raise ValueError(
                    f"Pattern family '{family.match_type}' severity must be "
                    f"{MIN_INDICATOR_SEVERITY}-{MAX_INDICATOR_SEVERITY}, got {family.severity}"
                )
            if not 0.0 <= family.confidence <= 1.0:
                raise ValueError(
                    f"Pattern family '{family.match_type}' confidence must be "
                    f"0.0-1.0, got {family.confidence}"
                )

    def is_enabled(self, config: CrisisDetectionConfig) -> bool:
        return config.enable_pattern_matching

    def scan(self, text: str) -> list[CrisisIndicator]:
        normalized_text = normalize_for_matching(text)
        indicators: list[CrisisIndicator] = []

        for family in self.families:
            for pattern in family.patterns:
                match = pattern.search(normalized_text)
                if not match:
                    continue

                indicators.append(CrisisIndicator(
                    kind=IndicatorKind.PATTERN,
                    severity=family.severity,
                    confidence=family.confidence,
                    description=family.description,
                    details={
                        "pattern": pattern.pattern,
                        "match_type": family.match_type.value,
                        "matched_text": match.group(0),
                    },
                ))

        if indicators:
            logger.debug(
                "Pattern indicators detected",
                match_types=[i.details["match_type"] for i in indicators],
            )

        return indicators


_default_detector = PatternCrisisDetector()


def detect_patterns(
    text: str,
    config: CrisisDetectionConfig = DEFAULT_CRISIS_CONFIG,
) -> list[CrisisIndicator]:
    """
    Run the default pattern families over text.

    Args:
        text: Text to analyze (empty or non-string yields no indicators)
        config: Normalized detection config

    Returns:
        One indicator per matching pattern
    """
    return _default_detector.detect(text, config)
