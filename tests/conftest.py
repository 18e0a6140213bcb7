"""
Pytest configuration and shared fixtures.
"""

import pytest
import json
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict

from ideamatch.catalog import get_idea
from ideamatch.database import init_database, get_session
from ideamatch.models import ExistingAudience, FounderProfile, PersonalityType


@pytest.fixture
def make_profile():
    """Factory for profiles: neutral defaults plus keyword overrides."""
    def _make(**overrides) -> FounderProfile:
        return replace(FounderProfile(), **overrides)
    return _make


@pytest.fixture
def newsletter_founder() -> FounderProfile:
    """Low-time, zero-capital, risk-averse writer."""
    return FounderProfile(
        hours_per_week=5,
        capital_available="$0",
        technical_ability="none",
        marketing_comfort=2,
        risk_tolerance=2,
        stress_tolerance=4,
        needs_predictability=True,
        has_writing_skills=True,
        has_sales_experience=False,
        existing_audience=ExistingAudience(has_audience=False),
        time_horizon="flexible",
        preferred_business_type="both",
        team_preference="solo",
        personality_type=PersonalityType(builder_vs_optimizer=3, structure_vs_ambiguity=2),
    )


@pytest.fixture
def technical_founder() -> FounderProfile:
    """Full-time funded developer with an audience."""
    return FounderProfile(
        employment_status="self-employed",
        hours_per_week=35,
        capital_available="$5k+",
        technical_ability="developer",
        marketing_comfort=8,
        risk_tolerance=8,
        has_sales_experience=True,
        existing_audience=ExistingAudience(has_audience=True, size=5000, platform="twitter"),
        time_horizon="long-term",
        preferred_business_type="b2b",
        team_preference="either",
        personality_type=PersonalityType(builder_vs_optimizer=7, structure_vs_ambiguity=8),
    )


@pytest.fixture
def newsletter_idea():
    return get_idea("newsletter-niche")


@pytest.fixture
def high_risk_idea():
    """A catalog idea altered to be high risk and needing real capital."""
    return replace(
        get_idea("micro-saas-automation"),
        id="high-risk-saas",
        risk_level="high",
        capital_needed="$2,000-$10,000",
        execution_complexity="complex",
    )


@pytest.fixture
def valid_profile_dict() -> Dict[str, Any]:
    """Valid raw profile record as it arrives from the questionnaire."""
    return {
        "employment_status": "employed",
        "hours_per_week": 12,
        "monthly_income_goal": 3000,
        "risk_tolerance": 4,
        "capital_available": "<$1k",
        "technical_ability": "no-code",
        "marketing_comfort": 6,
        "has_writing_skills": True,
        "has_video_skills": False,
        "has_sales_experience": False,
        "existing_audience": {"has_audience": True, "size": 1500, "platform": "linkedin"},
        "industry_experience": ["hr"],
        "has_family_obligations": True,
        "geographic_limits": False,
        "has_legal_restrictions": False,
        "stress_tolerance": 6,
        "needs_predictability": False,
        "preferred_business_type": "b2b",
        "preferred_model": ["saas", "content"],
        "time_horizon": "quick-cash",
        "team_preference": "solo",
        "role_preference": "builder",
        "personality_type": {
            "builder_vs_optimizer": 4,
            "visionary_vs_executor": 6,
            "structure_vs_ambiguity": 5,
        },
    }


@pytest.fixture
def questionnaire_answers() -> Dict[str, Any]:
    return {
        "employment": "employed",
        "day-job": "  HR   manager ",
        "hours": 8,
        "income-goal": "5000",
        "risk": 3,
        "capital": "<$1k",
        "technical": "no-code",
        "paid-skills": "recruiting",
        "marketing": 6,
        "content-skills": ["writing", "sales"],
        "audience": "medium",
        "obligations": "yes",
        "predictability": "predictable",
        "stress": 4,
        "selling-preference": "b2b",
        "business-model": ["service", "content"],
        "open-to-service": "yes",
        "build-in-public": "no",
        "time-horizon": "quick-cash",
        "builder-operator": 3,
        "solo-team": "solo",
    }


@pytest.fixture
def profile_file(tmp_path, valid_profile_dict) -> Path:
    path = tmp_path / "profile.json"
    path.write_text(json.dumps(valid_profile_dict))
    return path


@pytest.fixture
def db_path(tmp_path) -> Path:
    path = tmp_path / "test.db"
    init_database(path)
    return path


@pytest.fixture
def db_session(db_path):
    session = get_session(db_path)
    yield session
    session.close()
