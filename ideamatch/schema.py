from typing import Any, Dict, List, Tuple

from .errors import ProfileValidationError
from .models import (
    BUSINESS_MODELS,
    BUSINESS_TYPES,
    CAPITAL_LEVELS,
    EMPLOYMENT_STATUSES,
    ROLE_PREFERENCES,
    SELLING_PREFERENCES,
    TEAM_PREFERENCES,
    TECHNICAL_ABILITIES,
    TIME_HORIZONS,
    FounderProfile,
)

CHOICE_FIELDS = {
    "employment_status": EMPLOYMENT_STATUSES,
    "capital_available": CAPITAL_LEVELS,
    "technical_ability": TECHNICAL_ABILITIES,
    "preferred_business_type": BUSINESS_TYPES,
    "time_horizon": TIME_HORIZONS,
    "team_preference": TEAM_PREFERENCES,
    "role_preference": ROLE_PREFERENCES,
}
# (min, max); None means unbounded
INT_FIELDS = {
    "hours_per_week": (1, None),
    "monthly_income_goal": (0, None),
    "risk_tolerance": (1, 10),
    "marketing_comfort": (1, 10),
    "stress_tolerance": (1, 10),
}
BOOL_FIELDS = [
    "has_writing_skills",
    "has_video_skills",
    "has_sales_experience",
    "has_family_obligations",
    "geographic_limits",
    "has_legal_restrictions",
    "needs_predictability",
]
PERSONALITY_FIELDS = ["builder_vs_optimizer", "visionary_vs_executor", "structure_vs_ambiguity"]
STR_LIST_FIELDS = ["industry_experience", "preferred_model"]

REQUIRED_FIELDS = (
    list(CHOICE_FIELDS)
    + list(INT_FIELDS)
    + BOOL_FIELDS
    + STR_LIST_FIELDS
    + ["existing_audience", "personality_type"]
)
OPTIONAL_FIELDS = [
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


def _is_int(v: Any) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


def _check_int(errors: List[str], name: str, v: Any, lo, hi) -> None:
    if not _is_int(v):
        errors.append(f"Field '{name}' must be an integer")
        return
    if lo is not None and v < lo:
        errors.append(f"Field '{name}' must be >= {lo}")
    if hi is not None and v > hi:
        errors.append(f"Field '{name}' must be <= {hi}")


def _is_str_list(v: Any) -> bool:
    return isinstance(v, (list, tuple)) and all(isinstance(x, str) for x in v)


def validate_profile(data: Dict[str, Any]) -> List[str]:
    """
    Returns a list of validation error messages. Empty list means valid.
    Expects the snake_case field names of FounderProfile.
    """
    if not isinstance(data, dict):
        return ["Profile must be a JSON object"]

    errors: List[str] = []

    for f in REQUIRED_FIELDS:
        if f not in data:
            errors.append(f"Missing required field: {f}")

    for f, choices in CHOICE_FIELDS.items():
        if f in data and data[f] not in choices:
            errors.append(f"Field '{f}' must be one of: {', '.join(choices)}")

    for f, (lo, hi) in INT_FIELDS.items():
        if f in data:
            _check_int(errors, f, data[f], lo, hi)

    for f in BOOL_FIELDS:
        if f in data and not isinstance(data[f], bool):
            errors.append(f"Field '{f}' must be a boolean")

    for f in STR_LIST_FIELDS:
        if f in data and not _is_str_list(data[f]):
            errors.append(f"Field '{f}' must be a list of strings")
    if _is_str_list(data.get("preferred_model")):
        unknown = [m for m in data["preferred_model"] if m not in BUSINESS_MODELS]
        if unknown:
            errors.append(f"Field 'preferred_model' has unknown models: {', '.join(unknown)}")

    audience = data.get("existing_audience")
    if "existing_audience" in data:
        if not isinstance(audience, dict):
            errors.append("Field 'existing_audience' must be an object")
        else:
            if not isinstance(audience.get("has_audience"), bool):
                errors.append("Field 'existing_audience.has_audience' must be a boolean")
            if audience.get("size") is not None:
                _check_int(errors, "existing_audience.size", audience["size"], 0, None)
            platform = audience.get("platform")
            if platform is not None and not isinstance(platform, str):
                errors.append("Field 'existing_audience.platform' must be a string if provided")

    personality = data.get("personality_type")
    if "personality_type" in data:
        if not isinstance(personality, dict):
            errors.append("Field 'personality_type' must be an object")
        else:
            for f in PERSONALITY_FIELDS:
                if f not in personality:
                    errors.append(f"Missing required field: personality_type.{f}")
                else:
                    _check_int(errors, f"personality_type.{f}", personality[f], 1, 10)

    return errors


def validate_profile_strict(data: Dict[str, Any]) -> Tuple[bool, List[str]]:
    """
    Stricter checks on top of validate_profile: no unknown keys, the
    optional answers must have the right shape, and an audience size
    only makes sense when the founder has an audience.
    """
    errors = validate_profile(data)
    if not isinstance(data, dict):
        return False, errors

    known = set(REQUIRED_FIELDS) | set(OPTIONAL_FIELDS)
    for k in data:
        if k not in known:
            errors.append(f"Unknown field: {k}")

    for f in ("location", "day_job", "business_connections", "automation_insight"):
        if data.get(f) is not None and not isinstance(data[f], str):
            errors.append(f"Field '{f}' must be a string if provided")
    for f in ("paid_skills", "interests", "expertise", "tools_confident", "accessible_industries"):
        if f in data and not _is_str_list(data[f]):
            errors.append(f"Field '{f}' must be a list of strings")
    for f in ("build_in_public", "open_to_service"):
        if f in data and not isinstance(data[f], bool):
            errors.append(f"Field '{f}' must be a boolean")
    if data.get("selling_preference") is not None and data["selling_preference"] not in SELLING_PREFERENCES:
        errors.append(f"Field 'selling_preference' must be one of: {', '.join(SELLING_PREFERENCES)}")

    audience = data.get("existing_audience")
    if isinstance(audience, dict) and audience.get("has_audience") is False and (audience.get("size") or 0) > 0:
        errors.append("Field 'existing_audience.size' set without an audience")

    return (len(errors) == 0, errors)


def profile_from_dict(data: Dict[str, Any]) -> FounderProfile:
    """Validate ``data`` and build a FounderProfile. Raises ProfileValidationError."""
    errors = validate_profile(data)
    if errors:
        raise ProfileValidationError(errors)
    return FounderProfile.from_dict(data)
