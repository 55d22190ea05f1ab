"""Read-only helpers for follower/followee queries."""

from social.exceptions import NotFoundError, translate_storage_errors
from social.repos.follow_repo import FollowRepo
from social.repos.user_repo import UserRepo


class SocialGraphService:
    """Provide query helpers for follow relationships.

    Every lookup for an unknown user id raises NotFoundError rather than
    returning an empty result.
    """

    def __init__(self, follow_repo=None, user_repo=None):
        self.follow_repo = follow_repo or FollowRepo()
        self.user_repo = user_repo or UserRepo()

    def _require_user(self, user_id):
        if not self.user_repo.exists(id=user_id):
            raise NotFoundError("User not found.", field="user_id", data={"user_id": user_id})

    @translate_storage_errors("list followees")
    def list_followees(self, user_id):
        """Return the users `user_id` follows."""
        self._require_user(user_id)
        return self.follow_repo.followees(user_id)

    @translate_storage_errors("list followee ids")
    def list_followee_ids(self, user_id):
        """Return the ids of the users `user_id` follows."""
        self._require_user(user_id)
        return self.follow_repo.followee_ids(user_id)

    @translate_storage_errors("list followers")
    def list_followers(self, user_id):
        """Return the users following `user_id`."""
        self._require_user(user_id)
        return self.follow_repo.followers(user_id)

    def is_following(self, follower_id, followee_id):
        return self.follow_repo.is_following(follower_id=follower_id, followee_id=followee_id)
