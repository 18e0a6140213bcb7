"""
Match scoring rules and factor breakdown.

The rule table here is the only place match points are defined. Both
the idea matcher and the score-breakdown views go through
``breakdown()`` so the two can never disagree.

Rules are grouped. Within a group the first rule whose predicate holds
fires and the rest are skipped; a group whose rules all miss emits
nothing. Single-rule groups are independent bonuses.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from .logger import get_logger
from .models import (
    IMPACT_ORDER,
    NEGATIVE,
    NEUTRAL,
    POSITIVE,
    FounderProfile,
    IdeaTemplate,
    MatchBreakdown,
    MatchFactor,
)

logger = get_logger()

BASE_SCORE = 50
MIN_SCORE = 0
MAX_SCORE = 100

Predicate = Callable[[FounderProfile, IdeaTemplate], bool]
Describe = Callable[[FounderProfile, IdeaTemplate], str]


@dataclass(frozen=True)
class Rule:
    id: str
    category: str
    label: str
    description: str
    impact: str
    points: int
    applies: Predicate
    profile_value: Describe
    idea_value: Describe

    def to_factor(self, profile: FounderProfile, idea: IdeaTemplate) -> MatchFactor:
        return MatchFactor(
            id=self.id,
            category=self.category,
            label=self.label,
            description=self.description,
            impact=self.impact,
            points=self.points,
            profile_value=self.profile_value(profile, idea),
            idea_value=self.idea_value(profile, idea),
        )


def clamp_score(score: int) -> int:
    return max(MIN_SCORE, min(MAX_SCORE, score))


def format_audience_size(size: Optional[int], fallback: str) -> str:
    """Thousands-separated audience size, or ``fallback`` when unknown."""
    if size is None:
        return fallback
    return f"{size:,}"


def _always(profile: FounderProfile, idea: IdeaTemplate) -> bool:
    return True


def _is_low_cost(idea: IdeaTemplate) -> bool:
    return "$0" in idea.capital_needed or "$100" in idea.capital_needed


def _hours(p: FounderProfile, i: IdeaTemplate) -> str:
    return f"{p.hours_per_week} hrs/week"


def _complexity(p: FounderProfile, i: IdeaTemplate) -> str:
    return f"{i.execution_complexity} complexity"


def _execution(p: FounderProfile, i: IdeaTemplate) -> str:
    return f"{i.execution_complexity} execution"


def _risk(p: FounderProfile, i: IdeaTemplate) -> str:
    return f"{p.risk_tolerance}/10"


def _idea_risk(p: FounderProfile, i: IdeaTemplate) -> str:
    return f"{i.risk_level} risk"


def _marketing(p: FounderProfile, i: IdeaTemplate) -> str:
    return f"{p.marketing_comfort}/10"


def _category(p: FounderProfile, i: IdeaTemplate) -> str:
    return i.category


def _followers(p: FounderProfile, i: IdeaTemplate) -> str:
    return f"{format_audience_size(p.existing_audience.size, 'Has')} followers"


def _fixed(text: str) -> Describe:
    return lambda p, i: text


TIME_RULES = (
    Rule(
        "time-low-simple", "time", "Time Availability",
        "Your limited hours work well with simple execution", POSITIVE, 15,
        lambda p, i: p.hours_per_week < 10 and i.execution_complexity == "simple",
        _hours, _complexity,
    ),
    Rule(
        "time-high-complex", "time", "Time Availability",
        "Your available hours can handle this complexity", POSITIVE, 10,
        lambda p, i: p.hours_per_week >= 20 and i.execution_complexity != "simple",
        _hours, _complexity,
    ),
    Rule(
        "time-mismatch", "time", "Time Availability",
        "Limited hours may be challenging for this complexity", NEGATIVE, -5,
        lambda p, i: p.hours_per_week < 10 and i.execution_complexity != "simple",
        _hours, _complexity,
    ),
    Rule(
        "time-neutral", "time", "Time Availability",
        "Your schedule is compatible", NEUTRAL, 0,
        _always, _hours, _complexity,
    ),
)

CAPITAL_RULES = (
    Rule(
        "capital-match", "capital", "Capital Requirements",
        "Low startup costs match your available capital", POSITIVE, 15,
        lambda p, i: p.has_low_capital and _is_low_cost(i),
        lambda p, i: p.capital_available, lambda p, i: i.capital_needed,
    ),
    Rule(
        "capital-available", "capital", "Capital Requirements",
        "You have capital to invest if needed", POSITIVE, 5,
        lambda p, i: not p.has_low_capital,
        lambda p, i: p.capital_available, lambda p, i: i.capital_needed,
    ),
    Rule(
        "capital-neutral", "capital", "Capital Requirements",
        "Capital needs are manageable", NEUTRAL, 0,
        _always,
        lambda p, i: p.capital_available, lambda p, i: i.capital_needed,
    ),
)

RISK_RULES = (
    Rule(
        "risk-high-match", "risk", "Risk Tolerance",
        "Your high risk tolerance suits this venture", POSITIVE, 10,
        lambda p, i: p.risk_tolerance >= 7 and i.risk_level == "high",
        _risk, _idea_risk,
    ),
    Rule(
        "risk-low-match", "risk", "Risk Tolerance",
        "Low-risk idea matches your conservative approach", POSITIVE, 15,
        lambda p, i: p.risk_tolerance <= 3 and i.risk_level == "low",
        _risk, _idea_risk,
    ),
    Rule(
        "risk-mismatch", "risk", "Risk Tolerance",
        "Higher risk than your comfort level", NEGATIVE, -10,
        lambda p, i: p.risk_tolerance <= 3 and i.risk_level == "high",
        _risk, _idea_risk,
    ),
    Rule(
        "risk-neutral", "risk", "Risk Tolerance",
        "Risk level is within your comfort zone", NEUTRAL, 0,
        _always, _risk, _idea_risk,
    ),
)

TECHNICAL_RULES = (
    Rule(
        "tech-dev-saas", "skills", "Technical Skills",
        "Your dev skills are perfect for SaaS", POSITIVE, 15,
        lambda p, i: p.technical_ability == "developer" and i.category == "SaaS",
        _fixed("Developer"), _category,
    ),
    Rule(
        "tech-none-simple", "skills", "Technical Skills",
        "No technical skills needed for this", POSITIVE, 10,
        lambda p, i: p.technical_ability == "none" and i.execution_complexity == "simple",
        _fixed("Non-technical"), _execution,
    ),
    Rule(
        "tech-nocode-saas", "skills", "Technical Skills",
        "No-code tools can build this SaaS", POSITIVE, 10,
        lambda p, i: p.technical_ability == "no-code" and i.category == "SaaS",
        _fixed("No-code"), _category,
    ),
    Rule(
        "tech-neutral", "skills", "Technical Skills",
        "Your technical level works for this", NEUTRAL, 0,
        _always, lambda p, i: p.technical_ability or "None", _category,
    ),
)

MARKETING_RULES = (
    Rule(
        "marketing-content", "skills", "Marketing Comfort",
        "Your marketing skills excel at content", POSITIVE, 15,
        lambda p, i: p.marketing_comfort >= 7 and i.category == "Content",
        _marketing, _fixed("Content-based"),
    ),
    Rule(
        "marketing-community", "skills", "Marketing Comfort",
        "Community building needs marketing skills", POSITIVE, 10,
        lambda p, i: p.marketing_comfort >= 7 and i.category == "Community",
        _marketing, _fixed("Community-based"),
    ),
    Rule(
        "marketing-low", "skills", "Marketing Comfort",
        "Marketing may be a growth challenge", NEUTRAL, 0,
        lambda p, i: p.marketing_comfort <= 3,
        _marketing, _category,
    ),
)

WRITING_RULES = (
    Rule(
        "writing-match", "skills", "Writing Skills",
        "Your writing ability is a core asset here", POSITIVE, 15,
        lambda p, i: p.has_writing_skills and "Writing" in i.required_skills,
        _fixed("Has writing skills"), _fixed("Writing required"),
    ),
)

SALES_RULES = (
    Rule(
        "sales-service", "skills", "Sales Experience",
        "Sales skills help close service clients", POSITIVE, 15,
        lambda p, i: p.has_sales_experience and i.category == "Service",
        _fixed("Has sales experience"), _fixed("Service business"),
    ),
)

AUDIENCE_RULES = (
    Rule(
        "audience-content", "skills", "Existing Audience",
        "Your audience gives instant distribution", POSITIVE, 20,
        lambda p, i: p.existing_audience.has_audience and i.category == "Content",
        _followers, _fixed("Content business"),
    ),
    Rule(
        "audience-community", "skills", "Existing Audience",
        "Audience can seed your community", POSITIVE, 15,
        lambda p, i: p.existing_audience.has_audience and i.category == "Community",
        _followers, _fixed("Community business"),
    ),
)

HORIZON_RULES = (
    Rule(
        "horizon-quick", "preferences", "Time to Revenue",
        "Fast revenue matches your quick-cash goal", POSITIVE, 15,
        lambda p, i: p.time_horizon == "quick-cash" and "week" in i.time_to_first_revenue,
        _fixed("Quick cash preferred"), lambda p, i: i.time_to_first_revenue,
    ),
)

BUSINESS_TYPE_RULES = (
    Rule(
        "biz-type-b2b", "preferences", "Business Type",
        "B2B preference fits service model", POSITIVE, 10,
        lambda p, i: p.preferred_business_type == "b2b" and i.category == "Service",
        _fixed("B2B preferred"), _fixed("Service (B2B)"),
    ),
)

TEAM_RULES = (
    Rule(
        "solo-simple", "preferences", "Team Preference",
        "Can be executed solo as you prefer", POSITIVE, 10,
        lambda p, i: p.team_preference == "solo" and i.execution_complexity != "complex",
        _fixed("Solo preferred"), _execution,
    ),
)

RULE_GROUPS: Tuple[Tuple[Rule, ...], ...] = (
    TIME_RULES,
    CAPITAL_RULES,
    RISK_RULES,
    TECHNICAL_RULES,
    MARKETING_RULES,
    WRITING_RULES,
    SALES_RULES,
    AUDIENCE_RULES,
    HORIZON_RULES,
    BUSINESS_TYPE_RULES,
    TEAM_RULES,
)


def evaluate_rules(profile: FounderProfile, idea: IdeaTemplate) -> List[MatchFactor]:
    """Fired factors in rule-evaluation order (unsorted)."""
    fired = []
    for group in RULE_GROUPS:
        for rule in group:
            if rule.applies(profile, idea):
                fired.append(rule.to_factor(profile, idea))
                break
    return fired


def breakdown(profile: FounderProfile, idea: IdeaTemplate) -> MatchBreakdown:
    """
    Score ``idea`` for ``profile`` and keep every rule that fired.

    Factors come back positive first, then neutral, then negative, with
    rule order preserved inside each group. ``total_score`` is the base
    score plus all factor points, clamped to 0-100.
    """
    factors = evaluate_rules(profile, idea)
    raw = BASE_SCORE + sum(f.points for f in factors)
    ordered = sorted(factors, key=lambda f: IMPACT_ORDER[f.impact])
    logger.debug("Computed match breakdown", idea_id=idea.id, raw_score=raw, factors=len(ordered))
    return MatchBreakdown(factors=ordered, total_score=clamp_score(raw), raw_score=raw)
