"""Repository helpers for follow relationships."""

from typing import List, Set

from social.db_accessor import DB_Accessor
from social.models.follow import UserFollow
from social.models.user import User


class FollowRepo(DB_Accessor):
    """Repository wrapper for follower → followee edges."""
    def __init__(self) -> None:
        """Initialise with the UserFollow model."""
        super().__init__(UserFollow)

    def followees(self, user_id) -> List[User]:
        """Users that `user_id` follows, ordered like the User model."""
        return list(User.objects.filter(followers__follower_id=user_id))

    def followee_ids(self, user_id) -> Set[int]:
        """Ids of the users that `user_id` follows."""
        return set(
            self.model.objects.filter(follower_id=user_id).values_list("followee_id", flat=True)
        )

    def followers(self, user_id) -> List[User]:
        """Users following `user_id`."""
        return list(User.objects.filter(following__followee_id=user_id))

    def is_following(self, *, follower_id, followee_id) -> bool:
        """Return True if follower_id follows followee_id."""
        return self.exists(follower_id=follower_id, followee_id=followee_id)

    def follow(self, *, follower_id, followee_id) -> UserFollow:
        """Create a follow edge."""
        return self.create(follower_id=follower_id, followee_id=followee_id)

    def unfollow(self, *, follower_id, followee_id) -> int:
        """Remove a follow edge."""
        return self.delete(follower_id=follower_id, followee_id=followee_id)
