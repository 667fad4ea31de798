"""
Recommendation Generator

Maps a crisis level and its indicators to ordered, human-readable
intervention recommendations.

CLINICAL_REVIEW_REQUIRED: Wording is part of the contract with
display layers. The first line of each tier is checked verbatim.
"""

from typing import Iterable, Optional, Union

from pydantic.alias_generators import to_snake

from astral_crisis.domain.enums.crisis_level import CrisisLevel
from astral_crisis.domain.models.crisis_models import CrisisIndicator
from astral_crisis.services.detection.keyword_lexicon import (
    CATEGORY_ISOLATION,
    CATEGORY_SELF_HARM,
)
from astral_crisis.services.safety.emergency_resources import (
    DEFAULT_EMERGENCY_CONTACTS,
    EmergencyContactDirectory,
)


IMMEDIATE_HEADLINE = "IMMEDIATE INTERVENTION REQUIRED"
HIGH_PRIORITY_HEADLINE = "HIGH PRIORITY - Schedule urgent mental health appointment"

ISOLATION_RECOMMENDATION = "Focus on reducing isolation and building connections"
SELF_HARM_RECOMMENDATION = "Address self-harm behaviors with professional help"

# Category-specific additions, appended in this order
CATEGORY_RECOMMENDATIONS: tuple[tuple[str, str], ...] = (
    (CATEGORY_ISOLATION, ISOLATION_RECOMMENDATION),
    (CATEGORY_SELF_HARM, SELF_HARM_RECOMMENDATION),
)


class RecommendationGenerator:
    """
    Level-tiered recommendation generator.

    Hotline names and numbers come from the contact directory given
    at construction, so the same tiers can be worded for another
    jurisdiction.

    Usage:
        generator = RecommendationGenerator()
        lines = generator.generate(CrisisLevel.HIGH, indicators)
    """

    def __init__(
        self,
        contacts: EmergencyContactDirectory = DEFAULT_EMERGENCY_CONTACTS,
    ) -> None:
        self.contacts = contacts
        self._tiers = self._build_tiers(contacts)

    @staticmethod
    def _build_tiers(
        contacts: EmergencyContactDirectory,
    ) -> dict[CrisisLevel, tuple[str, ...]]:
        lifeline = contacts.lifeline
        emergency = contacts.emergency

        return {
            CrisisLevel.IMMEDIATE: (
                IMMEDIATE_HEADLINE,
                f"Contact emergency services ({emergency.phone}) if in immediate danger",
                f"Reach out to crisis hotline: {lifeline.name}",
                "Do not leave person alone",
                "Remove access to means of self-harm",
                "Seek immediate professional mental health evaluation",
            ),
            CrisisLevel.HIGH: (
                HIGH_PRIORITY_HEADLINE,
                f"Contact crisis hotline: {lifeline.name}",
                "Increase social support and check-ins",
                "Consider safety planning",
                "Monitor closely for escalation",
                "Provide crisis resources and coping strategies",
            ),
            CrisisLevel.MODERATE: (
                "Schedule mental health appointment within 1-2 days",
                "Increase supportive contact",
                "Provide coping strategies and resources",
                "Monitor for changes in mood or behavior",
                "Encourage professional support",
                f"Share crisis hotline information: {lifeline.phone}",
            ),
            CrisisLevel.LOW: (
                "Consider scheduling mental health check-in",
                "Provide emotional support and active listening",
                "Share mental health resources",
                "Encourage self-care activities",
                "Monitor for any escalation",
            ),
            CrisisLevel.NONE: (
                "Continue providing supportive communication",
                "Maintain awareness of mental health needs",
                "Provide resources if requested",
            ),
        }

    def generate(
        self,
        level: Union[CrisisLevel, str],
        indicators: Iterable[CrisisIndicator] = (),
    ) -> list[str]:
        """
        Build recommendations for a level.

        Category additions are appended once each, however many
        indicators share the category. Tags match in snake_case or
        camelCase.

        Args:
            level: Crisis level or its string value. Unknown values
                get the NONE tier.
            indicators: Indicators behind the level

        Returns:
            Ordered recommendation lines
        """
        recommendations = list(self._tiers[_coerce_level(level)])

        categories = {_normalize_category(i.category) for i in indicators}
        for category, recommendation in CATEGORY_RECOMMENDATIONS:
            if category in categories:
                recommendations.append(recommendation)

        return recommendations


def _normalize_category(category: Optional[str]) -> Optional[str]:
    """Map camelCase tags (``selfHarm``) onto lexicon keys (``self_harm``)."""
    if not isinstance(category, str):
        return None
    return to_snake(category)


def _coerce_level(level: Union[CrisisLevel, str]) -> CrisisLevel:
    if isinstance(level, CrisisLevel):
        return level
    try:
        return CrisisLevel(str(level).lower())
    except ValueError:
        return CrisisLevel.NONE


_default_generator = RecommendationGenerator()


def generate_recommendations(
    level: Union[CrisisLevel, str],
    indicators: Iterable[CrisisIndicator] = (),
    contacts: EmergencyContactDirectory = DEFAULT_EMERGENCY_CONTACTS,
) -> list[str]:
    """
    Build recommendations for a level.

    Args:
        level: Crisis level or its string value
        indicators: Indicators behind the level
        contacts: Contact directory used for hotline wording

    Returns:
        Ordered recommendation lines
    """
    generator = (
        _default_generator
        if contacts is DEFAULT_EMERGENCY_CONTACTS
        else RecommendationGenerator(contacts)
    )
    return generator.generate(level, indicators)
