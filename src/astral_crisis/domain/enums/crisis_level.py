"""
Crisis Level and Indicator Enumerations

Defines the discrete crisis classification produced by the severity
aggregator and the tags carried by individual indicators.

CLINICAL_REVIEW_REQUIRED: Level definitions and the actions attached
to them in the recommendation generator need clinical validation.
"""

from enum import StrEnum


class CrisisLevel(StrEnum):
    """
    Crisis severity classification.

    Values are the wire strings consumed by display layers.
    Use ``rank`` for ordering; string comparison is alphabetical.
    """

    NONE = "none"
    """No risk language detected above the low threshold."""

    LOW = "low"
    """
    Mild risk language.
    - Optional check-in
    - Emotional support and resources
    """

    MODERATE = "moderate"
    """
    Concerning language.
    - Appointment within 1-2 days
    - Crisis line information shared
    """

    HIGH = "high"
    """
    Serious risk language.
    - Urgent appointment
    - Safety planning and close monitoring
    """

    IMMEDIATE = "immediate"
    """
    Acute risk language (methods, goodbyes, time-bound threats).

    SAFETY_NOTE: At this level recommendations MUST lead with
    emergency contact guidance.
    """

    @property
    def rank(self) -> int:
        """Ordinal position, 0 (none) to 4 (immediate)."""
        return _LEVEL_ORDER.index(self)

    def is_at_least(self, other: "CrisisLevel") -> bool:
        """Check whether this level is as severe as ``other`` or more."""
        return self.rank >= other.rank


_LEVEL_ORDER: tuple[CrisisLevel, ...] = (
    CrisisLevel.NONE,
    CrisisLevel.LOW,
    CrisisLevel.MODERATE,
    CrisisLevel.HIGH,
    CrisisLevel.IMMEDIATE,
)


class IndicatorKind(StrEnum):
    """Detector family that produced an indicator."""

    KEYWORD = "keyword"
    PATTERN = "pattern"


class PatternMatchType(StrEnum):
    """Tag recorded on pattern indicators."""

    METHOD_INQUIRY = "method_inquiry"
    GOODBYE_MESSAGE = "goodbye_message"
    TIME_REFERENCE = "time_reference"
