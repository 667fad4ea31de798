"""
Crisis Detection Configuration

Fully-populated, bounds-checked configuration consumed by detectors.

ARCHITECTURE: Callers never build this directly from untrusted input.
Partial or untrusted values go through validate_config(), which clamps
them into the bounds declared here. Construction with out-of-range
values raises pydantic.ValidationError.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


SEVERITY_THRESHOLD_RANGE: tuple[float, float] = (0.0, 10.0)
CONFIDENCE_THRESHOLD_RANGE: tuple[float, float] = (0.0, 1.0)
MAX_ANALYSIS_LENGTH_RANGE: tuple[int, int] = (100, 50_000)


class CrisisDetectionConfig(BaseModel):
    """
    Controls which detectors run and bounds analysis cost.

    Attributes:
        enable_keyword_detection: Run the keyword lexicon scan
        enable_sentiment_analysis: Reserved for a future sentiment
            detector. No detector reads it today.
        enable_pattern_matching: Run the regex pattern families
        severity_threshold: Advisory value for downstream consumers.
            Does not gate indicators or change level boundaries.
        confidence_threshold: Advisory value for downstream consumers.
        max_analysis_length: Text is truncated to this many characters
            (prefix kept) before any detector runs
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    enable_keyword_detection: bool = True
    enable_sentiment_analysis: bool = True
    enable_pattern_matching: bool = True
    severity_threshold: float = Field(
        default=5.0,
        ge=SEVERITY_THRESHOLD_RANGE[0],
        le=SEVERITY_THRESHOLD_RANGE[1],
    )
    confidence_threshold: float = Field(
        default=0.7,
        ge=CONFIDENCE_THRESHOLD_RANGE[0],
        le=CONFIDENCE_THRESHOLD_RANGE[1],
    )
    max_analysis_length: int = Field(
        default=10_000,
        ge=MAX_ANALYSIS_LENGTH_RANGE[0],
        le=MAX_ANALYSIS_LENGTH_RANGE[1],
    )

    def to_dict(self) -> dict:
        return self.model_dump()


DEFAULT_CRISIS_CONFIG = CrisisDetectionConfig()
