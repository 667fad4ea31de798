"""
Astral Crisis Settings

Process-level configuration using Pydantic Settings.
Values are loaded from environment variables with the ASTRAL_ prefix.

NOTE: These settings only seed defaults for analyzers built through
CrisisTextAnalyzer.from_settings(). The module-level analyze() always
uses the documented library defaults so results never depend on the
environment.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DetectionSettings(BaseSettings):
    """Default crisis detection configuration."""

    model_config = SettingsConfigDict(env_prefix="ASTRAL_DETECTION_")

    enable_keyword_detection: bool = Field(default=True)
    enable_sentiment_analysis: bool = Field(default=True)
    enable_pattern_matching: bool = Field(default=True)
    # Out-of-range values are clamped by validate_config, not rejected here
    severity_threshold: float = Field(default=5.0)
    confidence_threshold: float = Field(default=0.7)
    max_analysis_length: int = Field(default=10000)


class Settings(BaseSettings):
    """
    Main library settings.

    Usage:
        settings = get_settings()
        configure_logging(settings)
        analyzer = CrisisTextAnalyzer.from_settings(settings)
    """

    model_config = SettingsConfigDict(
        env_prefix="ASTRAL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    env: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Runtime environment"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level"
    )

    detection: DetectionSettings = Field(default_factory=DetectionSettings)


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings.

    For testing, construct Settings directly instead.

    Returns:
        Settings: Library settings instance
    """
    return Settings()
