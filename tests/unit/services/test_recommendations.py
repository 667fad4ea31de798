"""
Unit Tests for Recommendation Generator

Tests tier wording, category additions and contact substitution.
"""

import pytest

from astral_crisis.domain.enums.crisis_level import CrisisLevel
from astral_crisis.services.safety.emergency_resources import (
    EmergencyContact,
    EmergencyContactDirectory,
)
from astral_crisis.services.safety.recommendations import (
    ISOLATION_RECOMMENDATION,
    SELF_HARM_RECOMMENDATION,
    RecommendationGenerator,
    generate_recommendations,
)


class TestLevelTiers:
    """Tests for the level-specific base lists."""

    def test_immediate_tier(self) -> None:
        recommendations = generate_recommendations(CrisisLevel.IMMEDIATE, [])

        assert recommendations[0] == "IMMEDIATE INTERVENTION REQUIRED"
        assert "Contact emergency services (911) if in immediate danger" in recommendations
        assert "Reach out to crisis hotline: 988 Suicide & Crisis Lifeline" in recommendations
        assert "Do not leave person alone" in recommendations
        assert "Remove access to means of self-harm" in recommendations
        assert "Seek immediate professional mental health evaluation" in recommendations

    def test_high_tier(self) -> None:
        recommendations = generate_recommendations(CrisisLevel.HIGH, [])

        assert recommendations[0] == "HIGH PRIORITY - Schedule urgent mental health appointment"
        assert "Contact crisis hotline: 988 Suicide & Crisis Lifeline" in recommendations
        assert "Consider safety planning" in recommendations
        assert "Monitor closely for escalation" in recommendations

    def test_moderate_tier(self) -> None:
        recommendations = generate_recommendations(CrisisLevel.MODERATE, [])

        assert recommendations[0] == "Schedule mental health appointment within 1-2 days"
        assert recommendations[-1] == "Share crisis hotline information: 988"

    def test_low_tier(self) -> None:
        recommendations = generate_recommendations(CrisisLevel.LOW, [])

        assert recommendations[0] == "Consider scheduling mental health check-in"
        assert "Monitor for any escalation" in recommendations
        assert len(recommendations) == 5

    def test_none_tier(self) -> None:
        recommendations = generate_recommendations(CrisisLevel.NONE, [])

        assert recommendations == [
            "Continue providing supportive communication",
            "Maintain awareness of mental health needs",
            "Provide resources if requested",
        ]

    def test_only_immediate_tier_has_intervention_headline(self) -> None:
        for level in (CrisisLevel.HIGH, CrisisLevel.MODERATE, CrisisLevel.LOW, CrisisLevel.NONE):
            assert "IMMEDIATE INTERVENTION REQUIRED" not in generate_recommendations(level, [])

    def test_string_levels_accepted(self) -> None:
        assert generate_recommendations("high", []) == generate_recommendations(CrisisLevel.HIGH, [])
        assert generate_recommendations("IMMEDIATE", [])[0] == "IMMEDIATE INTERVENTION REQUIRED"

    def test_unknown_level_falls_back_to_none_tier(self) -> None:
        assert generate_recommendations("catastrophic", []) == generate_recommendations(
            CrisisLevel.NONE, []
        )

    def test_callers_get_independent_lists(self) -> None:
        first = generate_recommendations(CrisisLevel.LOW, [])
        first.append("mutated")

        assert "mutated" not in generate_recommendations(CrisisLevel.LOW, [])


class TestCategoryAdditions:
    """Tests for indicator-driven additions."""

    def test_isolation_addition(self, make_indicator) -> None:
        recommendations = generate_recommendations(
            CrisisLevel.MODERATE, [make_indicator(severity=4, category="isolation")]
        )
        assert recommendations[-1] == ISOLATION_RECOMMENDATION

    def test_self_harm_addition(self, make_indicator) -> None:
        recommendations = generate_recommendations(
            CrisisLevel.HIGH, [make_indicator(severity=8, category="self_harm")]
        )
        assert recommendations[-1] == SELF_HARM_RECOMMENDATION

    def test_camel_case_self_harm_tag(self, make_indicator) -> None:
        recommendations = generate_recommendations(
            CrisisLevel.HIGH, [make_indicator(severity=8, category="selfHarm")]
        )
        assert recommendations[-1] == SELF_HARM_RECOMMENDATION

    def test_mixed_tag_spellings_deduplicated(self, make_indicator) -> None:
        indicators = [
            make_indicator(severity=8, category="selfHarm"),
            make_indicator(severity=8, category="self_harm"),
        ]
        recommendations = generate_recommendations(CrisisLevel.HIGH, indicators)

        assert recommendations.count(SELF_HARM_RECOMMENDATION) == 1

    def test_additions_deduplicated(self, make_indicator) -> None:
        indicators = [
            make_indicator(severity=4, category="isolation"),
            make_indicator(severity=4, category="isolation"),
        ]
        recommendations = generate_recommendations(CrisisLevel.LOW, indicators)

        assert recommendations.count(ISOLATION_RECOMMENDATION) == 1

    def test_additions_order_independent(self, make_indicator) -> None:
        isolation = make_indicator(severity=4, category="isolation")
        self_harm = make_indicator(severity=8, category="self_harm")

        forward = generate_recommendations(CrisisLevel.HIGH, [isolation, self_harm])
        backward = generate_recommendations(CrisisLevel.HIGH, [self_harm, isolation])

        assert forward == backward
        assert forward[-2:] == [ISOLATION_RECOMMENDATION, SELF_HARM_RECOMMENDATION]

    def test_other_categories_add_nothing(self, make_indicator) -> None:
        indicators = [
            make_indicator(severity=10, category="suicide"),
            make_indicator(match_type="goodbye_message"),
        ]
        assert generate_recommendations(CrisisLevel.IMMEDIATE, indicators) == (
            generate_recommendations(CrisisLevel.IMMEDIATE, [])
        )


class TestCustomContacts:
    """Tests for hotline wording from a custom directory."""

    @pytest.fixture
    def uk_contacts(self) -> EmergencyContactDirectory:
        return EmergencyContactDirectory(contacts=(
            EmergencyContact(key="suicide_lifeline", name="Samaritans", phone="116 123"),
            EmergencyContact(key="emergency", name="Emergency Services", phone="999"),
        ))

    def test_contacts_used_in_wording(self, uk_contacts: EmergencyContactDirectory) -> None:
        generator = RecommendationGenerator(uk_contacts)
        immediate = generator.generate(CrisisLevel.IMMEDIATE)

        assert "Contact emergency services (999) if in immediate danger" in immediate
        assert "Reach out to crisis hotline: Samaritans" in immediate
        assert generator.generate(CrisisLevel.MODERATE)[-1] == "Share crisis hotline information: 116 123"

    def test_module_function_accepts_contacts(self, uk_contacts: EmergencyContactDirectory) -> None:
        recommendations = generate_recommendations(CrisisLevel.HIGH, [], contacts=uk_contacts)
        assert "Contact crisis hotline: Samaritans" in recommendations
