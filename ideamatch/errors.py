"""Domain exceptions raised at the edges of the matching core."""

from typing import List


class ProfileValidationError(ValueError):
    """Raised when a raw profile record fails boundary validation."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors) or "invalid profile")


class UnknownIdeaError(KeyError):
    """Raised when an idea id is not part of the catalog."""

    def __init__(self, idea_id: str):
        self.idea_id = idea_id
        super().__init__(idea_id)

    def __str__(self) -> str:
        return f"Unknown idea id: {self.idea_id}"


class ProfileNotFoundError(LookupError):
    """Raised when a user has no stored founder profile."""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"No profile stored for user: {user_id}")
