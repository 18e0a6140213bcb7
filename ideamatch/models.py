"""
Data models for founder profiles, idea templates and match results.

Profiles and catalog entries are frozen; summaries and breakdowns are
plain values recomputed on demand from a profile.
"""

from dataclasses import asdict, dataclass, field, fields
from typing import Any, Dict, List, Optional, Tuple

EMPLOYMENT_STATUSES = ["employed", "self-employed", "unemployed", "student", "retired"]
CAPITAL_LEVELS = ["$0", "<$1k", "$1k-$5k", "$5k+"]
LOW_CAPITAL_LEVELS = {"$0", "<$1k"}
TECHNICAL_ABILITIES = ["none", "no-code", "ai-tools", "some-code", "developer"]
BUSINESS_TYPES = ["b2b", "b2c", "both"]
BUSINESS_MODELS = ["saas", "service", "content", "marketplace", "product"]
TIME_HORIZONS = ["quick-cash", "long-term", "flexible"]
TEAM_PREFERENCES = ["solo", "team", "either"]
ROLE_PREFERENCES = ["builder", "operator", "both"]
SELLING_PREFERENCES = ["b2b", "b2c", "teaching", "mixed"]

RISK_LEVELS = ["low", "medium", "high"]
EXECUTION_COMPLEXITIES = ["simple", "moderate", "complex"]

FACTOR_CATEGORIES = ["time", "capital", "skills", "risk", "preferences"]
CATEGORY_LABELS = {
    "time": "Time & Capacity",
    "capital": "Capital",
    "skills": "Skills & Assets",
    "risk": "Risk",
    "preferences": "Preferences",
}


POSITIVE = "positive"
NEUTRAL = "neutral"
NEGATIVE = "negative"
IMPACT_ORDER = {POSITIVE: 0, NEUTRAL: 1, NEGATIVE: 2}


@dataclass(frozen=True)
class ExistingAudience:
    has_audience: bool = False
    size: Optional[int] = None
    platform: Optional[str] = None


@dataclass(frozen=True)
class PersonalityType:
    """Three 1-10 sliders; low values lean to the first named pole."""

    builder_vs_optimizer: int = 5
    visionary_vs_executor: int = 5
    structure_vs_ambiguity: int = 5


def _build(cls, data: Dict[str, Any]):
    known = {f.name for f in fields(cls)}
    return cls(**{k: v for k, v in data.items() if k in known})


@dataclass(frozen=True)
class FounderProfile:
    """Self-reported founder attributes collected by the questionnaire."""

    # Background
    employment_status: str = "employed"
    hours_per_week: int = 10
    monthly_income_goal: int = 3000
    risk_tolerance: int = 5
    capital_available: str = "$0"

    # Skills & assets
    technical_ability: str = "none"
    marketing_comfort: int = 5
    has_writing_skills: bool = False
    has_video_skills: bool = False
    has_sales_experience: bool = False
    existing_audience: ExistingAudience = field(default_factory=ExistingAudience)
    industry_experience: Tuple[str, ...] = ()

    # Constraints
    has_family_obligations: bool = False
    geographic_limits: bool = False
    has_legal_restrictions: bool = False
    stress_tolerance: int = 5
    needs_predictability: bool = False

    # Preferences
    preferred_business_type: str = "both"
    preferred_model: Tuple[str, ...] = ()
    time_horizon: str = "flexible"
    team_preference: str = "solo"
    role_preference: str = "both"

    personality_type: PersonalityType = field(default_factory=PersonalityType)

    # Free-text answers, carried but not scored
    location: Optional[str] = None
    day_job: Optional[str] = None
    paid_skills: Tuple[str, ...] = ()
    interests: Tuple[str, ...] = ()
    expertise: Tuple[str, ...] = ()
    tools_confident: Tuple[str, ...] = ()
    selling_preference: Optional[str] = None
    build_in_public: bool = False
    open_to_service: bool = False
    accessible_industries: Tuple[str, ...] = ()
    business_connections: Optional[str] = None
    automation_insight: Optional[str] = None

    @property
    def has_low_capital(self) -> bool:
        return self.capital_available in LOW_CAPITAL_LEVELS

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FounderProfile":
        """
        Build a profile from a snake_case dict (e.g. parsed JSON).

        Unknown keys are ignored, missing keys take the dataclass defaults.
        No validation happens here; see ideamatch.schema for that.
        """
        known = {f.name for f in fields(cls)}
        kwargs = {k: v for k, v in data.items() if k in known}

        audience = kwargs.get("existing_audience")
        if isinstance(audience, dict):
            kwargs["existing_audience"] = _build(ExistingAudience, audience)
        personality = kwargs.get("personality_type")
        if isinstance(personality, dict):
            kwargs["personality_type"] = _build(PersonalityType, personality)

        for name in (
            "industry_experience",
            "preferred_model",
            "paid_skills",
            "interests",
            "expertise",
            "tools_confident",
            "accessible_industries",
        ):
            if name in kwargs and kwargs[name] is not None:
                kwargs[name] = tuple(kwargs[name])

        return cls(**kwargs)


@dataclass
class FounderProfileSummary:
    """Qualitative read-out of a profile. Regenerate whenever the profile changes."""

    founder_type: str
    execution_strengths: List[str] = field(default_factory=list)
    blind_spots: List[str] = field(default_factory=list)
    ideal_business_models: List[str] = field(default_factory=list)
    anti_patterns: List[str] = field(default_factory=list)
    weekly_capacity_score: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class IdeaTemplate:
    """Static catalog entry. Never mutated at runtime."""

    id: str
    title: str
    tagline: str
    category: str
    problem_statement: str
    target_customer: str
    solution: str
    required_skills: Tuple[str, ...]
    capital_needed: str
    time_to_first_revenue: str
    risk_level: str
    execution_complexity: str
    revenue_model: str
    potential_monthly_revenue: str
    mvp_scope: Tuple[str, ...]
    go_to_market_wedge: str
    seven_day_plan: Tuple[str, ...]
    kill_criteria: Tuple[str, ...]
    why_now: str

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        for k, v in data.items():
            if isinstance(v, tuple):
                data[k] = list(v)
        return data


@dataclass(frozen=True)
class BusinessIdea(IdeaTemplate):
    """A catalog idea annotated for one founder."""

    match_score: int = 0
    why_you: str = ""

    @classmethod
    def from_template(cls, template: IdeaTemplate, match_score: int, why_you: str) -> "BusinessIdea":
        values = {f.name: getattr(template, f.name) for f in fields(IdeaTemplate)}
        return cls(match_score=match_score, why_you=why_you, **values)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BusinessIdea":
        known = {f.name for f in fields(cls)}
        kwargs = {k: v for k, v in data.items() if k in known}
        for k, v in kwargs.items():
            if isinstance(v, list):
                kwargs[k] = tuple(v)
        return cls(**kwargs)


@dataclass(frozen=True)
class MatchFactor:
    """One scoring-rule outcome for a (profile, idea) pair."""

    id: str
    category: str
    label: str
    description: str
    impact: str
    points: int
    profile_value: str
    idea_value: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class MatchBreakdown:
    factors: List[MatchFactor]
    total_score: int
    raw_score: int  # base + points, before clamping

    def by_impact(self, impact: str) -> List[MatchFactor]:
        return [f for f in self.factors if f.impact == impact]

    @property
    def positive_points(self) -> int:
        return sum(f.points for f in self.by_impact(POSITIVE))

    @property
    def negative_points(self) -> int:
        return abs(sum(f.points for f in self.by_impact(NEGATIVE)))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "factors": [f.to_dict() for f in self.factors],
            "total_score": self.total_score,
            "raw_score": self.raw_score,
        }

