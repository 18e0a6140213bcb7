"""
Idea matcher.

Scores every non-excluded catalog idea through ``scoring.breakdown``,
picks the best one and writes the "why you" explanation for it.
"""

from typing import Iterable, List, Optional, Sequence, Tuple

from .catalog import available_ideas, get_idea
from .logger import get_logger
from .models import BusinessIdea, FounderProfile, FounderProfileSummary, IdeaTemplate, MatchBreakdown
from .scoring import breakdown, format_audience_size

logger = get_logger()

MAX_REASONS = 3
MAX_COMPARE = 4

ScoredIdea = Tuple[IdeaTemplate, MatchBreakdown]


def rank_ideas(profile: FounderProfile, excluded_ids: Iterable[str] = ()) -> List[ScoredIdea]:
    """
    Score every available idea, best first.

    Sorted on the unclamped score so two ideas that both clamp to 100
    still rank by how far past it they went. ``sorted`` is stable, so
    equal scores keep catalog order.
    """
    scored = [(idea, breakdown(profile, idea)) for idea in available_ideas(excluded_ids)]
    return sorted(scored, key=lambda pair: pair[1].raw_score, reverse=True)


def why_you(profile: FounderProfile, idea: IdeaTemplate) -> str:
    """Up to three reason sentences, in the order the checks run."""
    reasons = []

    if profile.hours_per_week < 15:
        reasons.append(
            f"With {profile.hours_per_week} hours/week available, this "
            f"{idea.execution_complexity} execution model fits your schedule."
        )
    else:
        reasons.append(
            f"Your {profile.hours_per_week} hours/week gives you enough runway to build this properly."
        )

    if "$0" in idea.capital_needed:
        reasons.append("Zero upfront investment means you can start today.")

    if profile.has_writing_skills and "Writing" in idea.required_skills:
        reasons.append("Your writing skills are the core asset this business needs.")

    if profile.has_sales_experience and idea.category == "Service":
        reasons.append("Your sales experience will help you close clients quickly.")

    audience = profile.existing_audience
    if audience.has_audience:
        size = format_audience_size(audience.size, "followers")
        reasons.append(f"Your existing audience of {size} gives you instant distribution.")

    if profile.risk_tolerance <= 4 and idea.risk_level == "low":
        reasons.append("The low-risk nature matches your preference for stability.")

    return " ".join(reasons[:MAX_REASONS])


def pick_best_idea(
    profile: FounderProfile,
    summary: FounderProfileSummary,
    excluded_ids: Iterable[str] = (),
) -> Optional[BusinessIdea]:
    """
    Return the best-scoring idea not in ``excluded_ids``.

    None means every catalog idea has been excluded; callers should show
    "no more ideas" rather than treat it as a failure. ``summary`` is
    accepted so callers pass the pair together; scoring reads only the
    raw profile.
    """
    ranked = rank_ideas(profile, excluded_ids)
    if not ranked:
        logger.debug("No ideas left to match", founder_type=summary.founder_type)
        return None

    best, best_breakdown = ranked[0]
    logger.debug(
        "Picked best idea",
        idea_id=best.id,
        raw_score=best_breakdown.raw_score,
        candidates=len(ranked),
    )
    return BusinessIdea.from_template(
        best,
        match_score=best_breakdown.total_score,
        why_you=why_you(profile, best),
    )


def annotate_idea(profile: FounderProfile, idea: IdeaTemplate) -> BusinessIdea:
    """Score and explain one specific idea, e.g. when saving it."""
    return BusinessIdea.from_template(
        idea,
        match_score=breakdown(profile, idea).total_score,
        why_you=why_you(profile, idea),
    )


def compare_ideas(profile: FounderProfile, idea_ids: Sequence[str]) -> List[ScoredIdea]:
    """Breakdowns for up to four catalog ideas, in the order requested."""
    if len(idea_ids) > MAX_COMPARE:
        raise ValueError(f"Can compare at most {MAX_COMPARE} ideas, got {len(idea_ids)}")
    ideas = [get_idea(idea_id) for idea_id in idea_ids]
    return [(idea, breakdown(profile, idea)) for idea in ideas]
