"""
Validation checklist for a saved idea.

Each idea gets the same starter checklist across four categories; the
founder ticks items off as they validate the idea.
"""

from datetime import datetime
from typing import Dict, Iterable, List, Optional

from .database import ValidationItem

DEFAULT_VALIDATION_ITEMS = {
    "market": [
        ("Identify 3+ competitors and analyze their strengths/weaknesses", "Research direct and indirect competitors"),
        ("Find 10+ online communities where target customers gather", "Reddit, Facebook groups, Discord servers, forums"),
        ("Estimate total addressable market (TAM) size", "Use industry reports or bottom-up calculations"),
        ("Identify market trends supporting this idea", "Growing demand, regulatory changes, tech shifts"),
    ],
    "customer": [
        ("Interview 5+ potential customers about the problem", "Focus on their pain points, not your solution"),
        ("Create an ideal customer profile (ICP)", "Demographics, behaviors, pain points, goals"),
        ("Validate willingness to pay for a solution", "Ask about budget and current spending"),
        ("Identify how customers currently solve this problem", "Workarounds, alternatives, or going without"),
    ],
    "product": [
        ("Define MVP features (what to build first)", "Focus on core value proposition only"),
        ("Create a landing page or mockup", "Test messaging and collect interest"),
        ("Get feedback on MVP concept from 5+ people", "Share designs or prototypes"),
        ("Validate technical feasibility", "Can you actually build this with available resources?"),
    ],
    "financial": [
        ("Calculate customer acquisition cost estimate", "Based on marketing channel research"),
        ("Project monthly expenses for first 6 months", "Tools, hosting, marketing, time investment"),
        ("Define pricing strategy", "Based on value delivered and competitor pricing"),
        ("Calculate break-even point", "How many customers/sales to cover costs?"),
    ],
}


def initialize_default_checklist(session, user_id: str, idea_id: str) -> List[ValidationItem]:
    items = []
    for category, entries in DEFAULT_VALIDATION_ITEMS.items():
        for index, (label, description) in enumerate(entries):
            items.append(
                ValidationItem(
                    user_id=user_id,
                    idea_id=idea_id,
                    label=label,
                    description=description,
                    category=category,
                    sort_order=index,
                )
            )
    session.add_all(items)
    session.commit()
    return items


def get_validation_items(session, user_id: str, idea_id: str) -> List[ValidationItem]:
    """Items ordered by category name, then position within the category."""
    return (
        session.query(ValidationItem)
        .filter_by(user_id=user_id, idea_id=idea_id)
        .order_by(ValidationItem.category, ValidationItem.sort_order)
        .all()
    )


def create_validation_item(
    session,
    user_id: str,
    idea_id: str,
    label: str,
    category: str,
    sort_order: int,
    description: Optional[str] = None,
) -> ValidationItem:
    item = ValidationItem(
        user_id=user_id,
        idea_id=idea_id,
        label=label,
        description=description,
        category=category,
        sort_order=sort_order,
    )
    session.add(item)
    session.commit()
    return item


def set_item_completed(
    session, user_id: str, idea_id: str, item_id: str, completed: bool
) -> Optional[ValidationItem]:
    """Tick or untick one item; None unless it belongs to this user and idea."""
    item = (
        session.query(ValidationItem)
        .filter_by(id=item_id, user_id=user_id, idea_id=idea_id)
        .first()
    )
    if item is None:
        return None
    item.is_completed = completed
    item.completed_at = datetime.now() if completed else None
    session.commit()
    return item


def delete_validation_item(session, user_id: str, idea_id: str, item_id: str) -> bool:
    deleted = (
        session.query(ValidationItem)
        .filter_by(id=item_id, user_id=user_id, idea_id=idea_id)
        .delete()
    )
    session.commit()
    return deleted > 0


def get_validation_progress(session, user_id: str, idea_ids: Iterable[str]) -> Dict[str, Dict[str, int]]:
    """{idea_id: {"completed": n, "total": m}} for ideas that have any items."""
    idea_ids = list(idea_ids)
    if not idea_ids:
        return {}

    rows = (
        session.query(ValidationItem.idea_id, ValidationItem.is_completed)
        .filter(ValidationItem.user_id == user_id, ValidationItem.idea_id.in_(idea_ids))
        .all()
    )
    progress: Dict[str, Dict[str, int]] = {}
    for idea_id, is_completed in rows:
        stats = progress.setdefault(idea_id, {"completed": 0, "total": 0})
        stats["total"] += 1
        if is_completed:
            stats["completed"] += 1
    return progress
