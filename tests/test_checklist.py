"""
Tests for the idea validation checklist.
"""

from ideamatch.checklist import (
    DEFAULT_VALIDATION_ITEMS,
    create_validation_item,
    delete_validation_item,
    get_validation_items,
    get_validation_progress,
    initialize_default_checklist,
    set_item_completed,
)


class TestDefaultChecklist:
    """Test the starter checklist."""

    def test_four_categories_of_four(self):
        assert list(DEFAULT_VALIDATION_ITEMS) == ["market", "customer", "product", "financial"]
        assert all(len(entries) == 4 for entries in DEFAULT_VALIDATION_ITEMS.values())

    def test_initialize(self, db_session):
        items = initialize_default_checklist(db_session, "u1", "newsletter-niche")

        assert len(items) == 16
        assert not any(item.is_completed for item in items)

    def test_items_ordered_by_category_then_position(self, db_session):
        initialize_default_checklist(db_session, "u1", "newsletter-niche")

        items = get_validation_items(db_session, "u1", "newsletter-niche")

        categories = [item.category for item in items]
        assert categories == sorted(categories)
        customer = [item for item in items if item.category == "customer"]
        assert [item.sort_order for item in customer] == [0, 1, 2, 3]
        assert customer[0].label == "Interview 5+ potential customers about the problem"

    def test_scoped_to_user_and_idea(self, db_session):
        initialize_default_checklist(db_session, "u1", "newsletter-niche")

        assert get_validation_items(db_session, "u2", "newsletter-niche") == []
        assert get_validation_items(db_session, "u1", "digital-templates") == []


class TestChecklistItems:
    """Test editing individual items."""

    def test_complete_and_reopen(self, db_session):
        item = create_validation_item(db_session, "u1", "newsletter-niche", "Pre-sell 3 subscriptions", "financial", 4)

        done = set_item_completed(db_session, "u1", "newsletter-niche", item.id, True)
        assert done.is_completed is True
        assert done.completed_at is not None

        reopened = set_item_completed(db_session, "u1", "newsletter-niche", item.id, False)
        assert reopened.is_completed is False
        assert reopened.completed_at is None

    def test_complete_missing_item(self, db_session):
        assert set_item_completed(db_session, "u1", "newsletter-niche", "nope", True) is None

    def test_delete_item(self, db_session):
        item = create_validation_item(
            db_session, "u1", "newsletter-niche", "Post in 3 communities", "market", 0,
            description="Reddit, Slack groups",
        )

        assert delete_validation_item(db_session, "u1", "newsletter-niche", item.id) is True
        assert delete_validation_item(db_session, "u1", "newsletter-niche", item.id) is False

    def test_other_user_cannot_edit_item(self, db_session):
        item = create_validation_item(db_session, "u1", "newsletter-niche", "Pre-sell 3 subscriptions", "financial", 4)

        assert set_item_completed(db_session, "u2", "newsletter-niche", item.id, True) is None
        assert delete_validation_item(db_session, "u2", "newsletter-niche", item.id) is False

        items = get_validation_items(db_session, "u1", "newsletter-niche")
        assert [i.is_completed for i in items] == [False]

    def test_item_scoped_to_idea(self, db_session):
        item = create_validation_item(db_session, "u1", "newsletter-niche", "Pre-sell 3 subscriptions", "financial", 4)

        assert set_item_completed(db_session, "u1", "digital-templates", item.id, True) is None
        assert delete_validation_item(db_session, "u1", "digital-templates", item.id) is False

    def test_progress(self, db_session):
        items = initialize_default_checklist(db_session, "u1", "newsletter-niche")
        initialize_default_checklist(db_session, "u1", "digital-templates")
        set_item_completed(db_session, "u1", "newsletter-niche", items[0].id, True)
        set_item_completed(db_session, "u1", "newsletter-niche", items[5].id, True)

        progress = get_validation_progress(
            db_session, "u1", ["newsletter-niche", "digital-templates", "community-platform"]
        )

        assert progress == {
            "newsletter-niche": {"completed": 2, "total": 16},
            "digital-templates": {"completed": 0, "total": 16},
        }

    def test_progress_no_ideas(self, db_session):
        assert get_validation_progress(db_session, "u1", []) == {}
