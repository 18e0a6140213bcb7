"""
Profile summarizer.

Derives the founder archetype, strengths, blind spots, ideal business
models, anti-patterns and weekly capacity from a FounderProfile. Each
rule below appends independently; list order is rule order.
"""

import math
from typing import List

from .logger import get_logger
from .models import FounderProfile, FounderProfileSummary

logger = get_logger()

MAX_STRENGTHS = 4
MAX_BLIND_SPOTS = 3
MAX_IDEAL_MODELS = 4
MAX_ANTI_PATTERNS = 3


def _dedupe(items: List[str]) -> List[str]:
    return list(dict.fromkeys(items))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def weekly_capacity_score(profile: FounderProfile) -> int:
    """
    0-10 capacity score: up to 5 from hours (40h = 5), up to 3 from
    stress tolerance, 2 more when the founder does not need predictable
    income. Clamped to 10 before rounding half up.
    """
    raw = (
        (profile.hours_per_week / 40) * 5
        + (profile.stress_tolerance / 10) * 3
        + (0 if profile.needs_predictability else 2)
    )
    return _round_half_up(min(10, raw))


def founder_type(profile: FounderProfile) -> str:
    parts = []

    if profile.has_low_capital:
        parts.append("Bootstrap")
    elif profile.capital_available == "$5k+":
        parts.append("Funded")

    if profile.technical_ability == "developer":
        parts.append("Technical")
    elif profile.technical_ability == "no-code":
        parts.append("No-Code")
    else:
        parts.append("Non-Technical")

    if profile.personality_type.builder_vs_optimizer <= 4:
        parts.append("Builder")
    else:
        parts.append("Operator")

    return " ".join(parts)


def summarize(profile: FounderProfile) -> FounderProfileSummary:
    strengths: List[str] = []
    blind_spots: List[str] = []
    ideal_models: List[str] = []
    anti_patterns: List[str] = []

    if profile.technical_ability == "developer":
        strengths.append("Technical execution")
        ideal_models += ["SaaS", "Developer tools"]
    elif profile.technical_ability == "no-code":
        strengths.append("No-code tool proficiency")
        ideal_models += ["Micro-SaaS", "Automation services"]
    else:
        blind_spots.append("Technical execution")
        anti_patterns.append("Code-heavy products")

    if profile.marketing_comfort >= 7:
        strengths.append("Marketing & distribution")
        ideal_models += ["Content business", "Audience-first products"]
    elif profile.marketing_comfort <= 3:
        blind_spots.append("Marketing & promotion")
        anti_patterns.append("Consumer products requiring viral growth")

    if profile.has_sales_experience:
        strengths.append("Sales & closing")
        ideal_models += ["Service business", "B2B sales"]

    audience = profile.existing_audience
    if audience.has_audience and (audience.size or 0) > 1000:
        strengths.append("Existing distribution")
        ideal_models += ["Info products", "Community-based business"]

    if profile.risk_tolerance >= 7:
        strengths.append("Risk-taking ability")
    elif profile.risk_tolerance <= 3:
        anti_patterns.append("High-burn ventures")
        ideal_models.append("Low-risk service business")

    if profile.hours_per_week < 10:
        anti_patterns.append("Time-intensive operations")
        ideal_models += ["Passive income products", "Automated systems"]
    elif profile.hours_per_week >= 30:
        ideal_models.append("Full-time venture")

    if profile.has_low_capital:
        anti_patterns.append("Capital-intensive businesses")
        ideal_models += ["Service-first model", "Bootstrap-friendly"]

    if profile.personality_type.builder_vs_optimizer <= 4:
        strengths.append("Building from scratch")
    else:
        strengths.append("Optimizing existing systems")

    if profile.personality_type.structure_vs_ambiguity <= 4:
        anti_patterns.append("Highly ambiguous markets")

    summary = FounderProfileSummary(
        founder_type=founder_type(profile),
        execution_strengths=strengths[:MAX_STRENGTHS],
        blind_spots=blind_spots[:MAX_BLIND_SPOTS],
        ideal_business_models=_dedupe(ideal_models)[:MAX_IDEAL_MODELS],
        anti_patterns=_dedupe(anti_patterns)[:MAX_ANTI_PATTERNS],
        weekly_capacity_score=weekly_capacity_score(profile),
    )
    logger.debug(
        "Profile summarized",
        founder_type=summary.founder_type,
        weekly_capacity_score=summary.weekly_capacity_score,
    )
    return summary
