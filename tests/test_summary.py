"""
Tests for the profile summarizer.
"""

from dataclasses import replace

from ideamatch.models import ExistingAudience, PersonalityType
from ideamatch.summary import founder_type, summarize, weekly_capacity_score


class TestFounderType:
    """Test founder archetype labels."""

    def test_bootstrap_non_technical_builder(self, newsletter_founder):
        """Zero capital, no tech skills and a builder slider of 3."""
        assert founder_type(newsletter_founder) == "Bootstrap Non-Technical Builder"

    def test_funded_technical_operator(self, technical_founder):
        assert founder_type(technical_founder) == "Funded Technical Operator"

    def test_mid_capital_has_no_capital_descriptor(self, make_profile):
        """$1k-$5k is neither bootstrap nor funded."""
        profile = make_profile(capital_available="$1k-$5k", technical_ability="no-code")
        assert founder_type(profile) == "No-Code Operator"

    def test_under_1k_counts_as_bootstrap(self, make_profile):
        profile = make_profile(capital_available="<$1k")
        assert founder_type(profile).startswith("Bootstrap ")

    def test_other_abilities_read_as_non_technical(self, make_profile):
        for ability in ("ai-tools", "some-code"):
            assert "Non-Technical" in founder_type(make_profile(technical_ability=ability))

    def test_builder_threshold(self, make_profile):
        """4 is still a builder, 5 is an operator."""
        builder = make_profile(personality_type=PersonalityType(builder_vs_optimizer=4))
        operator = make_profile(personality_type=PersonalityType(builder_vs_optimizer=5))
        assert founder_type(builder).endswith("Builder")
        assert founder_type(operator).endswith("Operator")


class TestWeeklyCapacity:
    """Test the 0-10 weekly capacity score."""

    def test_low_capacity_founder(self, newsletter_founder):
        """5h, stress 4, needs predictability: 0.625 + 1.2 = 1.825 rounds to 2."""
        assert weekly_capacity_score(newsletter_founder) == 2

    def test_exactly_ten(self, make_profile):
        profile = make_profile(hours_per_week=40, stress_tolerance=10, needs_predictability=False)
        assert weekly_capacity_score(profile) == 10

    def test_clamped_to_ten(self, make_profile):
        profile = make_profile(hours_per_week=80, stress_tolerance=10, needs_predictability=False)
        assert weekly_capacity_score(profile) == 10

    def test_half_rounds_up(self, make_profile):
        """8h and stress 5 with predictability gives exactly 2.5."""
        profile = make_profile(hours_per_week=8, stress_tolerance=5, needs_predictability=True)
        assert weekly_capacity_score(profile) == 3

    def test_minimum_inputs(self, make_profile):
        profile = make_profile(hours_per_week=1, stress_tolerance=1, needs_predictability=True)
        assert weekly_capacity_score(profile) == 0

    def test_always_in_range(self, make_profile):
        for hours in (1, 9, 20, 40, 60):
            for stress in (1, 5, 10):
                for predictable in (True, False):
                    score = weekly_capacity_score(make_profile(
                        hours_per_week=hours,
                        stress_tolerance=stress,
                        needs_predictability=predictable,
                    ))
                    assert 0 <= score <= 10


class TestSummarize:
    """Test strengths, blind spots, models and anti-patterns."""

    def test_low_resource_writer(self, newsletter_founder):
        summary = summarize(newsletter_founder)

        assert summary.founder_type == "Bootstrap Non-Technical Builder"
        assert summary.execution_strengths == ["Building from scratch"]
        assert summary.blind_spots == ["Technical execution", "Marketing & promotion"]
        assert summary.ideal_business_models == [
            "Low-risk service business",
            "Passive income products",
            "Automated systems",
            "Service-first model",
        ]
        assert summary.anti_patterns == [
            "Code-heavy products",
            "Consumer products requiring viral growth",
            "High-burn ventures",
        ]
        assert summary.weekly_capacity_score == 2

    def test_middling_marketing_skips_marketing_lists(self, newsletter_founder):
        """Marketing comfort 5 adds nothing, so later anti-patterns move up."""
        profile = replace(newsletter_founder, marketing_comfort=5)
        summary = summarize(profile)

        assert summary.blind_spots == ["Technical execution"]
        assert summary.anti_patterns == [
            "Code-heavy products",
            "High-burn ventures",
            "Time-intensive operations",
        ]

    def test_strong_technical_founder(self, technical_founder):
        summary = summarize(technical_founder)

        assert summary.execution_strengths == [
            "Technical execution",
            "Marketing & distribution",
            "Sales & closing",
            "Existing distribution",
        ]
        assert summary.blind_spots == []
        assert summary.ideal_business_models == [
            "SaaS",
            "Developer tools",
            "Content business",
            "Audience-first products",
        ]
        assert summary.anti_patterns == []
        assert summary.weekly_capacity_score == 8

    def test_no_code_strength(self, make_profile):
        summary = summarize(make_profile(technical_ability="no-code", capital_available="$5k+"))
        assert summary.execution_strengths[0] == "No-code tool proficiency"
        assert summary.ideal_business_models[:2] == ["Micro-SaaS", "Automation services"]
        assert "Technical execution" not in summary.blind_spots

    def test_small_audience_is_not_distribution(self, make_profile):
        """An audience only counts once it is over 1000."""
        small = make_profile(existing_audience=ExistingAudience(has_audience=True, size=1000))
        large = make_profile(existing_audience=ExistingAudience(has_audience=True, size=1001))
        assert "Existing distribution" not in summarize(small).execution_strengths
        assert "Existing distribution" in summarize(large).execution_strengths

    def test_unknown_audience_size(self, make_profile):
        profile = make_profile(existing_audience=ExistingAudience(has_audience=True, size=None))
        assert "Existing distribution" not in summarize(profile).execution_strengths

    def test_full_time_venture(self, make_profile):
        summary = summarize(make_profile(
            technical_ability="some-code",
            capital_available="$1k-$5k",
            hours_per_week=30,
        ))
        assert summary.ideal_business_models == ["Full-time venture"]

    def test_ambiguity_anti_pattern(self, make_profile):
        profile = make_profile(
            technical_ability="developer",
            capital_available="$5k+",
            personality_type=PersonalityType(structure_vs_ambiguity=4),
        )
        assert summarize(profile).anti_patterns == ["Highly ambiguous markets"]

    def test_list_limits(self, newsletter_founder, technical_founder, make_profile):
        profiles = [newsletter_founder, technical_founder, make_profile()]
        for profile in profiles:
            summary = summarize(profile)
            assert len(summary.execution_strengths) <= 4
            assert len(summary.blind_spots) <= 3
            assert len(summary.ideal_business_models) <= 4
            assert len(summary.anti_patterns) <= 3
            assert len(set(summary.ideal_business_models)) == len(summary.ideal_business_models)
            assert len(set(summary.anti_patterns)) == len(summary.anti_patterns)

    def test_summary_is_deterministic(self, technical_founder):
        assert summarize(technical_founder) == summarize(technical_founder)

    def test_to_dict(self, newsletter_founder):
        data = summarize(newsletter_founder).to_dict()
        assert data["founder_type"] == "Bootstrap Non-Technical Builder"
        assert data["weekly_capacity_score"] == 2
