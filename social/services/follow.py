import logging

from django.db import IntegrityError, transaction

from social.exceptions import ConflictError, NotFoundError, ValidationError, translate_storage_errors
from social.repos.follow_repo import FollowRepo
from social.repos.user_repo import UserRepo

logger = logging.getLogger(__name__)


class FollowService:
    """Create and remove directed follow edges. Self-follows are rejected."""

    def __init__(self, follow_repo=None, user_repo=None):
        self.follow_repo = follow_repo or FollowRepo()
        self.user_repo = user_repo or UserRepo()

    def _check_pair(self, follower_id, followee_id):
        data = {"follower_id": follower_id, "followee_id": followee_id}
        if follower_id == followee_id:
            raise ValidationError("You cannot follow yourself.", field="followee_id", data=data)
        for field, user_id in data.items():
            if not self.user_repo.exists(id=user_id):
                raise NotFoundError("User not found.", field=field, data=data)
        return data

    @translate_storage_errors("follow")
    def follow(self, follower_id, followee_id):
        data = self._check_pair(follower_id, followee_id)
        try:
            with transaction.atomic():
                edge = self.follow_repo.follow(follower_id=follower_id, followee_id=followee_id)
        except IntegrityError:
            raise ConflictError("You already follow this user.", field="followee_id", data=data)
        logger.info("User %s followed %s", follower_id, followee_id)
        return edge

    @translate_storage_errors("unfollow")
    def unfollow(self, follower_id, followee_id):
        self._check_pair(follower_id, followee_id)
        removed = self.follow_repo.unfollow(follower_id=follower_id, followee_id=followee_id)
        if removed:
            logger.info("User %s unfollowed %s", follower_id, followee_id)
        return bool(removed)
