"""
Mapping between questionnaire answers, FounderProfile and datastore rows.
"""

from typing import Any, Dict, Optional, Tuple

from .models import (
    BUSINESS_TYPES,
    ExistingAudience,
    FounderProfile,
    FounderProfileSummary,
    PersonalityType,
)

AUDIENCE_SIZES = {"none": 0, "small": 500, "medium": 5000, "large": 20000}
EXTRA_ANSWER_FIELDS = [
    "location",
    "day_job",
    "paid_skills",
    "interests",
    "expertise",
    "tools_confident",
    "selling_preference",
    "build_in_public",
    "open_to_service",
    "accessible_industries",
    "business_connections",
    "automation_insight",
]


def normalize_text(s: str) -> str:
    return " ".join(s.strip().split())


def _text(v: Any) -> Optional[str]:
    if not isinstance(v, str):
        return None
    cleaned = normalize_text(v)
    return cleaned or None


def _text_list(v: Any) -> Tuple[str, ...]:
    cleaned = _text(v)
    return (cleaned,) if cleaned else ()


def _int_or(v: Any, default: int) -> int:
    try:
        parsed = int(v)
    except (TypeError, ValueError):
        return default
    return parsed or default


def business_type_for(selling_preference: Optional[str]) -> str:
    """'b2b'/'b2c' pass through; teaching, mixed and unanswered read as 'both'."""
    if selling_preference in BUSINESS_TYPES:
        return selling_preference
    return "both"


def answers_to_profile(answers: Dict[str, Any]) -> FounderProfile:
    """
    Map questionnaire answers (keyed by question id) to a FounderProfile.

    Unanswered sliders fall back to the questionnaire's midpoints.
    """
    content_skills = answers.get("content-skills") or []
    audience_answer = answers.get("audience") or "none"
    selling = answers.get("selling-preference")

    return FounderProfile(
        employment_status=answers.get("employment") or "employed",
        hours_per_week=_int_or(answers.get("hours"), 10),
        monthly_income_goal=_int_or(answers.get("income-goal"), 3000),
        risk_tolerance=_int_or(answers.get("risk"), 5),
        capital_available=answers.get("capital") or "$0",
        location=_text(answers.get("location")),
        day_job=_text(answers.get("day-job")),
        technical_ability=answers.get("technical") or "none",
        marketing_comfort=_int_or(answers.get("marketing"), 5),
        has_writing_skills="writing" in content_skills,
        has_video_skills="video" in content_skills,
        has_sales_experience="sales" in content_skills,
        existing_audience=ExistingAudience(
            has_audience=audience_answer != "none",
            size=AUDIENCE_SIZES.get(audience_answer, 0),
        ),
        industry_experience=(),
        paid_skills=_text_list(answers.get("paid-skills")),
        interests=_text_list(answers.get("interests")),
        expertise=_text_list(answers.get("expertise")),
        tools_confident=_text_list(answers.get("tools-confident")),
        has_family_obligations=answers.get("obligations") == "yes",
        geographic_limits=False,
        has_legal_restrictions=False,
        stress_tolerance=_int_or(answers.get("stress"), 5),
        needs_predictability=answers.get("predictability") == "predictable",
        preferred_business_type=business_type_for(selling),
        preferred_model=tuple(answers.get("business-model") or ()),
        time_horizon=answers.get("time-horizon") or "flexible",
        team_preference=answers.get("solo-team") or "solo",
        role_preference="both",
        selling_preference=selling,
        build_in_public=answers.get("build-in-public") == "yes",
        open_to_service=answers.get("open-to-service") == "yes",
        accessible_industries=_text_list(answers.get("accessible-industries")),
        business_connections=_text(answers.get("business-connections")),
        automation_insight=_text(answers.get("automation-insight")),
        personality_type=PersonalityType(
            builder_vs_optimizer=_int_or(answers.get("builder-operator"), 5),
        ),
    )


def _extra_answers(profile: FounderProfile) -> Dict[str, Any]:
    extras = {}
    for f in EXTRA_ANSWER_FIELDS:
        v = getattr(profile, f)
        extras[f] = list(v) if isinstance(v, tuple) else v
    return extras


def profile_to_row(profile: FounderProfile) -> Dict[str, Any]:
    """Flatten a profile into datastore column values."""
    return {
        "employment_status": profile.employment_status,
        "hours_per_week": profile.hours_per_week,
        "monthly_income_goal": profile.monthly_income_goal,
        "risk_tolerance": profile.risk_tolerance,
        "capital_available": profile.capital_available,
        "technical_ability": profile.technical_ability,
        "marketing_comfort": profile.marketing_comfort,
        "has_writing_skills": profile.has_writing_skills,
        "has_video_skills": profile.has_video_skills,
        "has_sales_experience": profile.has_sales_experience,
        "has_audience": profile.existing_audience.has_audience,
        "audience_size": profile.existing_audience.size or 0,
        "audience_platform": profile.existing_audience.platform,
        "industry_experience": list(profile.industry_experience),
        "has_family_obligations": profile.has_family_obligations,
        "geographic_limits": profile.geographic_limits,
        "has_legal_restrictions": profile.has_legal_restrictions,
        "stress_tolerance": profile.stress_tolerance,
        "needs_predictability": profile.needs_predictability,
        "preferred_business_type": profile.preferred_business_type,
        "preferred_models": list(profile.preferred_model),
        "time_horizon": profile.time_horizon,
        "team_preference": profile.team_preference,
        "role_preference": profile.role_preference,
        "builder_vs_optimizer": profile.personality_type.builder_vs_optimizer,
        "visionary_vs_executor": profile.personality_type.visionary_vs_executor,
        "structure_vs_ambiguity": profile.personality_type.structure_vs_ambiguity,
        "extra_answers": _extra_answers(profile),
    }


def summary_to_row(summary: FounderProfileSummary) -> Dict[str, Any]:
    return {
        "founder_type": summary.founder_type,
        "execution_strengths": list(summary.execution_strengths),
        "blind_spots": list(summary.blind_spots),
        "ideal_business_models": list(summary.ideal_business_models),
        "anti_patterns": list(summary.anti_patterns),
        "weekly_capacity_score": summary.weekly_capacity_score,
    }


def _column(row: Dict[str, Any], name: str, default: Any) -> Any:
    value = row.get(name)
    return default if value is None else value


def row_to_profile(row: Dict[str, Any]) -> FounderProfile:
    """Rebuild a profile from stored columns; empty columns take defaults."""
    extras = row.get("extra_answers") or {}
    extra_kwargs = {
        f: tuple(v) if isinstance(v, list) else v
        for f, v in extras.items()
        if f in EXTRA_ANSWER_FIELDS and v is not None
    }
    return FounderProfile(
        **extra_kwargs,
        employment_status=row.get("employment_status") or "employed",
        hours_per_week=row.get("hours_per_week") or 10,
        monthly_income_goal=_column(row, "monthly_income_goal", 3000),
        risk_tolerance=row.get("risk_tolerance") or 5,
        capital_available=row.get("capital_available") or "$0",
        technical_ability=row.get("technical_ability") or "none",
        marketing_comfort=row.get("marketing_comfort") or 5,
        has_writing_skills=bool(row.get("has_writing_skills")),
        has_video_skills=bool(row.get("has_video_skills")),
        has_sales_experience=bool(row.get("has_sales_experience")),
        existing_audience=ExistingAudience(
            has_audience=bool(row.get("has_audience")),
            size=row.get("audience_size") or 0,
            platform=row.get("audience_platform") or None,
        ),
        industry_experience=tuple(row.get("industry_experience") or ()),
        has_family_obligations=bool(row.get("has_family_obligations")),
        geographic_limits=bool(row.get("geographic_limits")),
        has_legal_restrictions=bool(row.get("has_legal_restrictions")),
        stress_tolerance=row.get("stress_tolerance") or 5,
        needs_predictability=bool(row.get("needs_predictability")),
        preferred_business_type=row.get("preferred_business_type") or "both",
        preferred_model=tuple(row.get("preferred_models") or ()),
        time_horizon=row.get("time_horizon") or "flexible",
        team_preference=row.get("team_preference") or "solo",
        role_preference=row.get("role_preference") or "both",
        personality_type=PersonalityType(
            builder_vs_optimizer=row.get("builder_vs_optimizer") or 5,
            visionary_vs_executor=row.get("visionary_vs_executor") or 5,
            structure_vs_ambiguity=row.get("structure_vs_ambiguity") or 5,
        ),
    )


def row_to_summary(row: Dict[str, Any]) -> FounderProfileSummary:
    return FounderProfileSummary(
        founder_type=row.get("founder_type") or "Unknown",
        execution_strengths=list(row.get("execution_strengths") or []),
        blind_spots=list(row.get("blind_spots") or []),
        ideal_business_models=list(row.get("ideal_business_models") or []),
        anti_patterns=list(row.get("anti_patterns") or []),
        weekly_capacity_score=_column(row, "weekly_capacity_score", 5),
    )
