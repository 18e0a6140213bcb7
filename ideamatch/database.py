"""
Database schema and connection management.

Uses SQLite with SQLAlchemy for profiles, saved/dismissed ideas, notes,
collections and validation checklists.
"""

import uuid
from datetime import datetime
from pathlib import Path
from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
    create_engine,
)
from sqlalchemy.orm import declarative_base, sessionmaker

Base = declarative_base()


def _uuid() -> str:
    return str(uuid.uuid4())


class Profile(Base):
    """Founder profile plus its derived summary and decision-mode state."""

    __tablename__ = "profiles"

    user_id = Column(String, primary_key=True)

    # Background
    employment_status = Column(String)
    hours_per_week = Column(Integer)
    monthly_income_goal = Column(Integer)
    risk_tolerance = Column(Integer)
    capital_available = Column(String)

    # Skills
    technical_ability = Column(String)
    marketing_comfort = Column(Integer)
    has_writing_skills = Column(Boolean)
    has_video_skills = Column(Boolean)
    has_sales_experience = Column(Boolean)
    has_audience = Column(Boolean)
    audience_size = Column(Integer)
    audience_platform = Column(String)
    industry_experience = Column(JSON)

    # Constraints
    has_family_obligations = Column(Boolean)
    geographic_limits = Column(Boolean)
    has_legal_restrictions = Column(Boolean)
    stress_tolerance = Column(Integer)
    needs_predictability = Column(Boolean)

    # Preferences
    preferred_business_type = Column(String)
    preferred_models = Column(JSON)
    time_horizon = Column(String)
    team_preference = Column(String)
    role_preference = Column(String)

    # Personality
    builder_vs_optimizer = Column(Integer)
    visionary_vs_executor = Column(Integer)
    structure_vs_ambiguity = Column(Integer)

    extra_answers = Column(JSON)  # free-text questionnaire answers

    # Summary
    founder_type = Column(String)
    execution_strengths = Column(JSON)
    blind_spots = Column(JSON)
    ideal_business_models = Column(JSON)
    anti_patterns = Column(JSON)
    weekly_capacity_score = Column(Integer)

    has_completed_onboarding = Column(Boolean, nullable=False, default=False)
    is_decision_mode_active = Column(Boolean, nullable=False, default=False)
    active_idea_id = Column(String)

    created_at = Column(DateTime, nullable=False, default=datetime.now)
    updated_at = Column(DateTime, nullable=False, default=datetime.now, onupdate=datetime.now)

    def as_row(self) -> dict:
        return {c.name: getattr(self, c.name) for c in self.__table__.columns}


class SavedIdea(Base):
    __tablename__ = "saved_ideas"
    __table_args__ = (UniqueConstraint("user_id", "idea_id"),)

    id = Column(String, primary_key=True, default=_uuid)
    user_id = Column(String, nullable=False)
    idea_id = Column(String, nullable=False)
    idea_data = Column(JSON, nullable=False)  # BusinessIdea as saved, incl. match_score
    saved_at = Column(DateTime, nullable=False, default=datetime.now)


class DismissedIdea(Base):
    __tablename__ = "dismissed_ideas"
    __table_args__ = (UniqueConstraint("user_id", "idea_id"),)

    id = Column(String, primary_key=True, default=_uuid)
    user_id = Column(String, nullable=False)
    idea_id = Column(String, nullable=False)
    dismissed_at = Column(DateTime, nullable=False, default=datetime.now)


class IdeaNote(Base):
    __tablename__ = "idea_notes"

    id = Column(String, primary_key=True, default=_uuid)
    user_id = Column(String, nullable=False)
    idea_id = Column(String, nullable=False)
    content = Column(Text, nullable=False)
    created_at = Column(DateTime, nullable=False, default=datetime.now)
    updated_at = Column(DateTime, nullable=False, default=datetime.now, onupdate=datetime.now)


class IdeaCollection(Base):
    __tablename__ = "idea_collections"

    id = Column(String, primary_key=True, default=_uuid)
    user_id = Column(String, nullable=False)
    name = Column(String, nullable=False)
    color = Column(String)
    created_at = Column(DateTime, nullable=False, default=datetime.now)
    updated_at = Column(DateTime, nullable=False, default=datetime.now, onupdate=datetime.now)


class CollectionIdea(Base):
    __tablename__ = "collection_ideas"
    __table_args__ = (UniqueConstraint("collection_id", "idea_id"),)

    id = Column(String, primary_key=True, default=_uuid)
    collection_id = Column(String, ForeignKey("idea_collections.id", ondelete="CASCADE"), nullable=False)
    user_id = Column(String, nullable=False)
    idea_id = Column(String, nullable=False)
    added_at = Column(DateTime, nullable=False, default=datetime.now)


class ValidationItem(Base):
    __tablename__ = "idea_validation_items"

    id = Column(String, primary_key=True, default=_uuid)
    user_id = Column(String, nullable=False)
    idea_id = Column(String, nullable=False)
    label = Column(String, nullable=False)
    description = Column(String)
    is_completed = Column(Boolean, nullable=False, default=False)
    category = Column(String, nullable=False)  # market, customer, product, financial
    sort_order = Column(Integer, nullable=False, default=0)
    completed_at = Column(DateTime)
    created_at = Column(DateTime, nullable=False, default=datetime.now)
    updated_at = Column(DateTime, nullable=False, default=datetime.now, onupdate=datetime.now)


def init_database(db_path: Path) -> None:
    """
    Initialize database and create tables.

    Args:
        db_path: Path to SQLite database file
    """
    db_path.parent.mkdir(parents=True, exist_ok=True)
    engine = create_engine(f"sqlite:///{db_path}")
    Base.metadata.create_all(engine)


def get_session(db_path: Path):
    """
    Get database session.

    Args:
        db_path: Path to SQLite database file

    Returns:
        SQLAlchemy session
    """
    engine = create_engine(f"sqlite:///{db_path}")
    Session = sessionmaker(bind=engine)
    return Session()
