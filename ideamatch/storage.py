"""
Persistence for everything around the matching core.

All functions take an open SQLAlchemy session and commit their own
changes. Lookups by user return plain domain objects where one exists.
"""

from datetime import datetime
from typing import Dict, List, Optional, Tuple

from .database import (
    CollectionIdea,
    DismissedIdea,
    IdeaCollection,
    IdeaNote,
    Profile,
    SavedIdea,
)
from .errors import ProfileNotFoundError
from .logger import get_logger
from .models import BusinessIdea, FounderProfile, FounderProfileSummary
from .questionnaire import profile_to_row, row_to_profile, row_to_summary, summary_to_row

logger = get_logger()


def _get_profile_row(session, user_id: str) -> Profile:
    row = session.get(Profile, user_id)
    if row is None:
        raise ProfileNotFoundError(user_id)
    return row


# Profiles

def save_founder_profile(
    session,
    user_id: str,
    profile: FounderProfile,
    summary: FounderProfileSummary,
) -> Dict[str, str]:
    """Store a profile with its summary and mark onboarding complete."""
    values = {**profile_to_row(profile), **summary_to_row(summary)}
    row = session.get(Profile, user_id)
    status = "updated"
    if row is None:
        row = Profile(user_id=user_id)
        session.add(row)
        status = "new"
    for column, value in values.items():
        setattr(row, column, value)
    row.has_completed_onboarding = True
    session.commit()
    logger.debug("Saved founder profile", user_id=user_id, status=status)
    return {"status": status}


def load_founder_profile(session, user_id: str) -> Tuple[FounderProfile, FounderProfileSummary]:
    row = _get_profile_row(session, user_id).as_row()
    return row_to_profile(row), row_to_summary(row)


# Saved ideas

def save_idea(session, user_id: str, idea: BusinessIdea) -> Dict[str, str]:
    data = idea.to_dict()
    existing = session.query(SavedIdea).filter_by(user_id=user_id, idea_id=idea.id).first()
    if existing is None:
        session.add(SavedIdea(user_id=user_id, idea_id=idea.id, idea_data=data))
        status = "new"
    elif existing.idea_data != data:
        existing.idea_data = data
        existing.saved_at = datetime.now()
        status = "updated"
    else:
        status = "no-change"
    session.commit()
    return {"status": status}


def get_saved_ideas(session, user_id: str) -> List[BusinessIdea]:
    """Saved ideas, most recently saved first."""
    rows = (
        session.query(SavedIdea)
        .filter_by(user_id=user_id)
        .order_by(SavedIdea.saved_at.desc())
        .all()
    )
    return [BusinessIdea.from_dict(row.idea_data) for row in rows]


def remove_saved_idea(session, user_id: str, idea_id: str) -> bool:
    deleted = session.query(SavedIdea).filter_by(user_id=user_id, idea_id=idea_id).delete()
    session.commit()
    return deleted > 0


# Dismissed ideas

def dismiss_idea(session, user_id: str, idea_id: str) -> Dict[str, str]:
    existing = session.query(DismissedIdea).filter_by(user_id=user_id, idea_id=idea_id).first()
    if existing is not None:
        return {"status": "no-change"}
    session.add(DismissedIdea(user_id=user_id, idea_id=idea_id))
    session.commit()
    return {"status": "new"}


def get_dismissed_idea_ids(session, user_id: str) -> List[str]:
    rows = (
        session.query(DismissedIdea.idea_id)
        .filter_by(user_id=user_id)
        .order_by(DismissedIdea.dismissed_at)
        .all()
    )
    return [idea_id for (idea_id,) in rows]


# Notes

def add_note(session, user_id: str, idea_id: str, content: str) -> IdeaNote:
    note = IdeaNote(user_id=user_id, idea_id=idea_id, content=content)
    session.add(note)
    session.commit()
    return note


def update_note(session, user_id: str, note_id: str, content: str) -> Optional[IdeaNote]:
    note = session.query(IdeaNote).filter_by(id=note_id, user_id=user_id).first()
    if note is None:
        return None
    note.content = content
    session.commit()
    return note


def delete_note(session, user_id: str, note_id: str) -> bool:
    deleted = session.query(IdeaNote).filter_by(id=note_id, user_id=user_id).delete()
    session.commit()
    return deleted > 0


def get_notes(session, user_id: str, idea_id: str) -> List[IdeaNote]:
    """Notes on one idea, newest first."""
    return (
        session.query(IdeaNote)
        .filter_by(user_id=user_id, idea_id=idea_id)
        .order_by(IdeaNote.created_at.desc())
        .all()
    )


# Collections

def create_collection(session, user_id: str, name: str, color: Optional[str] = None) -> IdeaCollection:
    collection = IdeaCollection(user_id=user_id, name=name, color=color)
    session.add(collection)
    session.commit()
    return collection


def _get_collection(session, user_id: str, collection_id: str) -> Optional[IdeaCollection]:
    return session.query(IdeaCollection).filter_by(id=collection_id, user_id=user_id).first()


def rename_collection(session, user_id: str, collection_id: str, name: str) -> Optional[IdeaCollection]:
    collection = _get_collection(session, user_id, collection_id)
    if collection is None:
        return None
    collection.name = name
    session.commit()
    return collection


def delete_collection(session, user_id: str, collection_id: str) -> bool:
    collection = _get_collection(session, user_id, collection_id)
    if collection is None:
        return False
    # SQLite only honours ON DELETE CASCADE with the foreign_keys pragma on
    session.query(CollectionIdea).filter_by(collection_id=collection_id).delete()
    session.delete(collection)
    session.commit()
    return True


def get_collections(session, user_id: str) -> List[IdeaCollection]:
    return (
        session.query(IdeaCollection)
        .filter_by(user_id=user_id)
        .order_by(IdeaCollection.created_at)
        .all()
    )


def add_to_collection(session, user_id: str, collection_id: str, idea_id: str) -> Dict[str, str]:
    if _get_collection(session, user_id, collection_id) is None:
        return {"status": "not-found"}
    existing = (
        session.query(CollectionIdea)
        .filter_by(collection_id=collection_id, idea_id=idea_id)
        .first()
    )
    if existing is not None:
        return {"status": "no-change"}
    session.add(CollectionIdea(collection_id=collection_id, user_id=user_id, idea_id=idea_id))
    session.commit()
    return {"status": "new"}


def remove_from_collection(session, user_id: str, collection_id: str, idea_id: str) -> bool:
    deleted = (
        session.query(CollectionIdea)
        .filter_by(collection_id=collection_id, user_id=user_id, idea_id=idea_id)
        .delete()
    )
    session.commit()
    return deleted > 0


def get_collection_idea_ids(session, user_id: str, collection_id: str) -> List[str]:
    rows = (
        session.query(CollectionIdea.idea_id)
        .filter_by(collection_id=collection_id, user_id=user_id)
        .order_by(CollectionIdea.added_at)
        .all()
    )
    return [idea_id for (idea_id,) in rows]


# Decision mode

def get_decision_mode(session, user_id: str) -> Tuple[bool, Optional[str]]:
    """(is_active, active_idea_id). A user without a profile reads as inactive."""
    row = session.get(Profile, user_id)
    if row is None:
        return (False, None)
    return (bool(row.is_decision_mode_active), row.active_idea_id)


def commit_to_idea(session, user_id: str, idea_id: str) -> None:
    row = _get_profile_row(session, user_id)
    row.is_decision_mode_active = True
    row.active_idea_id = idea_id
    session.commit()
    logger.info("Decision mode activated", user_id=user_id, idea_id=idea_id)


def exit_decision_mode(session, user_id: str, reason: Optional[str] = None) -> None:
    row = _get_profile_row(session, user_id)
    row.is_decision_mode_active = False
    row.active_idea_id = None
    session.commit()
    logger.info("Decision mode deactivated", user_id=user_id, reason=reason)
