"""Tests configuration and fixtures."""

from typing import Callable

import pytest

from astral_crisis.config import Settings
from astral_crisis.domain.enums.crisis_level import IndicatorKind
from astral_crisis.domain.models.crisis_models import CrisisIndicator
from astral_crisis.domain.models.detection_config import (
    CrisisDetectionConfig,
    DEFAULT_CRISIS_CONFIG,
)


@pytest.fixture
def test_settings() -> Settings:
    """Create test settings without reading the environment file."""
    return Settings(env="development", log_level="DEBUG", _env_file=None)


@pytest.fixture
def default_config() -> CrisisDetectionConfig:
    return DEFAULT_CRISIS_CONFIG


@pytest.fixture
def make_indicator() -> Callable[..., CrisisIndicator]:
    """Factory for hand-built indicators."""

    def _make(
        severity: int = 5,
        confidence: float = 0.5,
        kind: IndicatorKind = IndicatorKind.KEYWORD,
        description: str = "Test indicator",
        **details,
    ) -> CrisisIndicator:
        return CrisisIndicator(
            kind=kind,
            severity=severity,
            confidence=confidence,
            description=description,
            details=details,
        )

    return _make
