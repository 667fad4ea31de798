"""
Unit Tests for Pattern Crisis Detector

Tests the method-inquiry, goodbye-message and time-reference families.
"""

import re

import pytest

from astral_crisis.domain.enums.crisis_level import IndicatorKind, PatternMatchType
from astral_crisis.domain.models.detection_config import CrisisDetectionConfig
from astral_crisis.services.detection.pattern_detector import (
    CRISIS_PATTERN_FAMILIES,
    PatternCrisisDetector,
    PatternFamily,
    detect_patterns,
)


class TestPatternCrisisDetector:
    """Test suite for PatternCrisisDetector."""

    @pytest.fixture
    def detector(self) -> PatternCrisisDetector:
        return PatternCrisisDetector()

    def test_method_inquiry_values(self) -> None:
        indicators = detect_patterns("how to kill myself")

        assert len(indicators) == 1
        assert indicators[0].kind == IndicatorKind.PATTERN
        assert indicators[0].severity == 9
        assert indicators[0].confidence == 0.85
        assert indicators[0].details["match_type"] == "method_inquiry"

    @pytest.mark.parametrize("text", [
        "how to kill myself",
        "ways to die",
        "methods of suicide",
        "how to hurt myself",
        "ways to end it all",
        "methods of self-harm",
    ])
    def test_method_inquiries(self, detector: PatternCrisisDetector, text: str) -> None:
        indicators = detector.detect(text, CrisisDetectionConfig())

        assert indicators
        assert indicators[0].details["match_type"] == PatternMatchType.METHOD_INQUIRY.value

    @pytest.mark.parametrize("text", [
        "goodbye everyone",
        "this is goodbye",
        "final message to all",
        "goodbye cruel world",
        "my final words",
    ])
    def test_goodbye_messages(self, detector: PatternCrisisDetector, text: str) -> None:
        indicators = detector.detect(text, CrisisDetectionConfig())

        assert indicators
        assert indicators[0].severity == 10
        assert indicators[0].confidence == 0.90
        assert indicators[0].details["match_type"] == "goodbye_message"

    @pytest.mark.parametrize("text", [
        "tonight it will be over",
        "by tomorrow I will be gone",
        "won't be here much longer",
        "by morning I will be dead",
        "I won’t be here tomorrow",
    ])
    def test_time_references(self, detector: PatternCrisisDetector, text: str) -> None:
        indicators = detector.detect(text, CrisisDetectionConfig())

        assert indicators
        assert indicators[0].severity == 8
        assert indicators[0].confidence == 0.80
        assert indicators[0].details["match_type"] == "time_reference"

    @pytest.mark.parametrize("text", [
        "How to cook dinner",
        "Ways to improve my skills",
        "Methods for studying",
        "Goodbye for now",
        "See you tomorrow",
    ])
    def test_normal_text_yields_nothing(self, detector: PatternCrisisDetector, text: str) -> None:
        assert detector.detect(text, CrisisDetectionConfig()) == []

    def test_case_insensitive(self) -> None:
        assert detect_patterns("HOW TO END IT")

    @pytest.mark.parametrize("text", ["", None])
    def test_empty_input(self, text) -> None:
        assert detect_patterns(text) == []

    def test_disabled_by_config(self) -> None:
        config = CrisisDetectionConfig(enable_pattern_matching=False)
        assert detect_patterns("goodbye everyone", config) == []

    def test_each_matching_pattern_emits_indicator(self, detector: PatternCrisisDetector) -> None:
        text = "This is goodbye. Goodbye everyone, these are my final words."
        indicators = detector.detect(text, CrisisDetectionConfig())

        assert len(indicators) == 3
        assert {i.details["match_type"] for i in indicators} == {"goodbye_message"}
        assert len({i.details["pattern"] for i in indicators}) == 3

    def test_multiple_families(self, detector: PatternCrisisDetector) -> None:
        text = "I looked up how to end it. Goodbye everyone, tonight it will be over."
        match_types = [i.details["match_type"] for i in detector.detect(text, CrisisDetectionConfig())]

        assert match_types == ["method_inquiry", "goodbye_message", "time_reference"]

    def test_details_record_pattern_and_match(self, detector: PatternCrisisDetector) -> None:
        indicator = detector.detect("ways to die", CrisisDetectionConfig())[0]

        assert indicator.details["pattern"] == r"ways to (die|suicide|end it)"
        assert indicator.details["matched_text"] == "ways to die"


class TestPatternFamilies:
    """Tests for the static pattern families."""

    def test_family_values(self) -> None:
        values = {
            f.match_type: (f.severity, f.confidence) for f in CRISIS_PATTERN_FAMILIES
        }
        assert values == {
            PatternMatchType.METHOD_INQUIRY: (9, 0.85),
            PatternMatchType.GOODBYE_MESSAGE: (10, 0.90),
            PatternMatchType.TIME_REFERENCE: (8, 0.80),
        }

    def test_custom_family(self) -> None:
        family = PatternFamily(
            match_type=PatternMatchType.TIME_REFERENCE,
            description="Weekend reference",
            severity=5,
            confidence=0.5,
            patterns=(re.compile(r"this weekend", re.IGNORECASE),),
        )
        indicators = PatternCrisisDetector((family,)).detect(
            "It ends this weekend", CrisisDetectionConfig()
        )

        assert len(indicators) == 1
        assert indicators[0].description == "Weekend reference"

    @pytest.mark.parametrize("severity, confidence", [(11, 0.5), (5, 1.5)])
    def test_out_of_range_family_rejected(self, severity: int, confidence: float) -> None:
        family = PatternFamily(
            match_type=PatternMatchType.METHOD_INQUIRY,
            description="bad",
            severity=severity,
            confidence=confidence,
            patterns=(),
        )
        with pytest.raises(ValueError):
            PatternCrisisDetector((family,))
