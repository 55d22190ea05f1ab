"""Repositories for (user, post) pair relations: likes and saved posts."""

from typing import Set

from social.db_accessor import DB_Accessor
from social.models.like import PostLike
from social.models.saved_post import SavedPost


class UserPostPairRepo(DB_Accessor):
    """Shared add/remove/count helpers for a model unique on (user, post)."""

    def add(self, *, user_id, post_id):
        """Insert the pair; raises IntegrityError if it already exists."""
        return self.create(user_id=user_id, post_id=post_id)

    def remove(self, *, user_id, post_id) -> int:
        """Delete the pair; return how many rows were removed (0 or 1)."""
        return self.delete(user_id=user_id, post_id=post_id)

    def count_for_post(self, post_id) -> int:
        return self.count(post_id=post_id)

    def post_ids_for_user(self, user_id) -> Set[int]:
        return set(self.model.objects.filter(user_id=user_id).values_list("post_id", flat=True))


class LikeRepo(UserPostPairRepo):
    def __init__(self) -> None:
        super().__init__(PostLike)


class SavedPostRepo(UserPostPairRepo):
    def __init__(self) -> None:
        super().__init__(SavedPost)
