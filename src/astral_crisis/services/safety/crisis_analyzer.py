"""
Crisis Text Analyzer

Main entry point for crisis text analysis. Composes the detectors,
the severity aggregator and the recommendation generator under a
validated configuration.

SAFETY-CRITICAL: analyze() never raises for caller input. Absent
text, oversized text and broken configs all produce a valid result.

ARCHITECTURE: Synchronous and stateless. One analyzer instance can
serve concurrent calls; detectors, thresholds and the contact
directory are read-only after construction.
"""

import time
from typing import Any, Mapping, Optional, Union

from astral_crisis.config.logging_config import get_logger
from astral_crisis.config.settings import Settings
from astral_crisis.domain.enums.crisis_level import CrisisLevel
from astral_crisis.domain.models.crisis_models import (
    AnalysisMetadata,
    CrisisDetectionResult,
    CrisisIndicator,
)
from astral_crisis.domain.models.detection_config import (
    CrisisDetectionConfig,
    DEFAULT_CRISIS_CONFIG,
)
from astral_crisis.services.detection.detector_interface import CrisisIndicatorDetector
from astral_crisis.services.detection.keyword_detector import KeywordCrisisDetector
from astral_crisis.services.detection.pattern_detector import PatternCrisisDetector
from astral_crisis.services.safety.config_validator import validate_config
from astral_crisis.services.safety.emergency_resources import (
    DEFAULT_EMERGENCY_CONTACTS,
    EmergencyContactDirectory,
)
from astral_crisis.services.safety.recommendations import RecommendationGenerator
from astral_crisis.services.safety.severity_aggregator import (
    DEFAULT_SEVERITY_THRESHOLDS,
    SeverityThresholds,
    calculate_severity,
)

logger = get_logger(__name__)


ConfigInput = Union[CrisisDetectionConfig, Mapping[str, Any], None]


class CrisisTextAnalyzer:
    """
    Crisis text analysis pipeline.

    Flow:
    1. Validate config (clamp, fill defaults)
    2. Truncate text to max_analysis_length (prefix kept)
    3. Run detectors in order (keyword, then pattern)
    4. Aggregate severity
    5. Generate recommendations

    Usage:
        analyzer = CrisisTextAnalyzer()
        result = analyzer.analyze(text, {"max_analysis_length": 2000})
    """

    def __init__(
        self,
        detectors: Optional[tuple[CrisisIndicatorDetector, ...]] = None,
        thresholds: SeverityThresholds = DEFAULT_SEVERITY_THRESHOLDS,
        contacts: EmergencyContactDirectory = DEFAULT_EMERGENCY_CONTACTS,
        default_config: CrisisDetectionConfig = DEFAULT_CRISIS_CONFIG,
    ) -> None:
        """
        Initialize analyzer.

        Args:
            detectors: Detectors to run, in output order. Defaults to
                keyword then pattern detection.
            thresholds: Severity level boundaries
            contacts: Emergency contacts used for recommendation wording
            default_config: Config used when a call passes none
        """
        if detectors is None:
            detectors = (KeywordCrisisDetector(), PatternCrisisDetector())
        self.detectors = tuple(detectors)
        self.thresholds = thresholds
        self.default_config = default_config
        self._recommendations = RecommendationGenerator(contacts)

        logger.debug(
            "Crisis text analyzer initialized",
            detectors=[d.name for d in self.detectors],
            thresholds=thresholds.to_dict(),
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "CrisisTextAnalyzer":
        """Build an analyzer whose default config comes from settings."""
        return cls(default_config=validate_config(settings.detection.model_dump()))

    def analyze(
        self,
        text: Any,
        config: ConfigInput = None,
    ) -> CrisisDetectionResult:
        """
        Analyze text for crisis indicators.

        Args:
            text: User text. Anything that is not a non-empty string
                yields a NONE result with text_length 0.
            config: Partial config, full config, or None for the
                analyzer default

        Returns:
            Immutable CrisisDetectionResult
        """
        start_time = time.perf_counter()
        effective_config = (
            self.default_config if config is None else validate_config(config)
        )

        if not isinstance(text, str) or not text:
            return CrisisDetectionResult(
                level=CrisisLevel.NONE,
                confidence=0.0,
                indicators=(),
                recommendations=(),
                metadata=AnalysisMetadata(
                    analysis_time_ms=_elapsed_ms(start_time),
                    text_length=0,
                    config=effective_config,
                    severity_score=0.0,
                ),
            )

        analyzed_text = text[:effective_config.max_analysis_length]

        indicators: list[CrisisIndicator] = []
        for detector in self.detectors:
            indicators.extend(detector.detect(analyzed_text, effective_config))

        severity = calculate_severity(indicators, self.thresholds)
        recommendations = self._recommendations.generate(severity.level, indicators)

        result = CrisisDetectionResult(
            level=severity.level,
            confidence=severity.confidence,
            indicators=tuple(indicators),
            recommendations=tuple(recommendations),
            metadata=AnalysisMetadata(
                analysis_time_ms=_elapsed_ms(start_time),
                text_length=len(analyzed_text),
                config=effective_config,
                severity_score=severity.score,
            ),
        )

        if result.requires_intervention:
            logger.warning(
                "Crisis level requires intervention",
                level=severity.level.value,
                severity_score=severity.score,
                indicator_count=len(indicators),
                confidence=severity.confidence,
            )

        logger.debug(
            "Crisis analysis completed",
            level=severity.level.value,
            severity_score=severity.score,
            indicator_count=len(indicators),
            text_length=len(analyzed_text),
            truncated=len(analyzed_text) < len(text),
            latency_ms=round(result.metadata.analysis_time_ms, 3),
        )

        return result


def _elapsed_ms(start_time: float) -> float:
    return (time.perf_counter() - start_time) * 1000


_default_analyzer = CrisisTextAnalyzer()


def analyze(text: Any, config: ConfigInput = None) -> CrisisDetectionResult:
    """
    Analyze text with the default analyzer and library defaults.

    Args:
        text: User text
        config: Partial config, full config, or None

    Returns:
        Immutable CrisisDetectionResult
    """
    return _default_analyzer.analyze(text, config)
