"""Repository helpers for user lookups."""

from typing import Optional

from social.db_accessor import DB_Accessor
from social.models.user import User


class UserRepo(DB_Accessor):
    """Repository for basic user queries."""
    def __init__(self) -> None:
        """Initialise with the User model."""
        super().__init__(User)

    def find(self, user_id) -> Optional[User]:
        """Return a user by id, or None when absent."""
        return self.first(id=user_id)

    def email_taken(self, email: str) -> bool:
        """Return True when an account already uses this email (case-insensitive)."""
        return self.model.objects.filter(email__iexact=email).exists()
