"""
Crisis Indicator Detector Interface

Common shape for every detection strategy: text + config -> indicators.

ARCHITECTURE: The analyzer runs an ordered tuple of detectors and
concatenates their output. New strategies (e.g. a sentiment detector
behind enable_sentiment_analysis) plug in here without touching the
severity aggregator or the recommendation generator.
"""

from abc import ABC, abstractmethod

from astral_crisis.domain.models.crisis_models import CrisisIndicator
from astral_crisis.domain.models.detection_config import CrisisDetectionConfig


# Typographic apostrophes folded before scanning
_APOSTROPHE_TRANSLATION = str.maketrans({"’": "'", "‘": "'"})


def normalize_for_matching(text: str) -> str:
    """Lowercase text and fold curly apostrophes to ASCII."""
    return text.translate(_APOSTROPHE_TRANSLATION).lower()


class CrisisIndicatorDetector(ABC):
    """
    Abstract detector.

    Implementations must be stateless after construction so that a
    single instance can serve concurrent calls.
    """

    name: str = "detector"

    @abstractmethod
    def is_enabled(self, config: CrisisDetectionConfig) -> bool:
        """Check whether the config switches this detector on."""

    @abstractmethod
    def scan(self, text: str) -> list[CrisisIndicator]:
        """
        Scan non-empty text for indicators.

        Args:
            text: Text already truncated by the caller

        Returns:
            Indicators in detector-defined order
        """

    def detect(
        self,
        text: str,
        config: CrisisDetectionConfig,
    ) -> list[CrisisIndicator]:
        """
        Detect indicators, honouring the config toggle.

        Empty or non-string text and disabled detectors yield an empty
        list rather than an error.

        Args:
            text: Text to analyze
            config: Normalized detection config

        Returns:
            Detected indicators
        """
        if not isinstance(text, str) or not text or not self.is_enabled(config):
            return []
        return self.scan(text)
