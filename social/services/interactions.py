"""Likes, saves and comments on posts."""

import logging
from dataclasses import dataclass

from django.db import IntegrityError, transaction

from social.exceptions import NotFoundError, ValidationError, translate_storage_errors
from social.models.comment import Comment
from social.repos.comment_repo import CommentRepo
from social.repos.interaction_repo import LikeRepo, SavedPostRepo
from social.repos.post_repo import PostRepo
from social.repos.user_repo import UserRepo

logger = logging.getLogger(__name__)

COMMENT_MAX_LENGTH = 2000


@dataclass(frozen=True)
class LikeResult:
    liked: bool
    like_count: int


@dataclass(frozen=True)
class SaveResult:
    saved: bool


class InteractionService:
    """Encapsulate like/save toggles and comment creation."""

    def __init__(
        self,
        *,
        like_repo=None,
        saved_repo=None,
        comment_repo=None,
        post_repo=None,
        user_repo=None,
    ):
        self.like_repo = like_repo or LikeRepo()
        self.saved_repo = saved_repo or SavedPostRepo()
        self.comment_repo = comment_repo or CommentRepo()
        self.post_repo = post_repo or PostRepo()
        self.user_repo = user_repo or UserRepo()

    def _require_post(self, post_id):
        if not self.post_repo.exists(id=post_id):
            raise NotFoundError("Post not found.", field="post_id", data={"post_id": post_id})

    def _require_user(self, user_id):
        if not self.user_repo.exists(id=user_id):
            raise NotFoundError("User not found.", field="user_id", data={"user_id": user_id})

    def _toggle_pair(self, repo, user_id, post_id):
        """Flip a (user, post) row and return True when it now exists.

        Deleting first means no separate existence read can go stale. If the
        insert hits the unique constraint, a concurrent request created the
        row in between; that is handled by taking the delete branch once.
        """
        if repo.remove(user_id=user_id, post_id=post_id):
            return False
        try:
            with transaction.atomic():
                repo.add(user_id=user_id, post_id=post_id)
            return True
        except IntegrityError:
            logger.warning(
                "Concurrent %s toggle for user %s on post %s; removing instead",
                repo.model.__name__, user_id, post_id,
            )
            repo.remove(user_id=user_id, post_id=post_id)
            return False

    @translate_storage_errors("toggle like")
    def toggle_like(self, user_id, post_id) -> LikeResult:
        """Toggle like/unlike and return the resulting state and like count."""
        self._require_post(post_id)
        with transaction.atomic():
            liked = self._toggle_pair(self.like_repo, user_id, post_id)
        return LikeResult(liked=liked, like_count=self.like_repo.count_for_post(post_id))

    @translate_storage_errors("toggle save")
    def toggle_save(self, user_id, post_id) -> SaveResult:
        """Toggle the user's bookmark on a post."""
        self._require_post(post_id)
        with transaction.atomic():
            saved = self._toggle_pair(self.saved_repo, user_id, post_id)
        return SaveResult(saved=saved)

    @translate_storage_errors("list saved posts")
    def list_saved_posts(self, user_id):
        """Posts the user bookmarked, newest post first."""
        self._require_user(user_id)
        post_ids = self.saved_repo.post_ids_for_user(user_id)
        return self.post_repo.list_by_ids(post_ids, viewer_id=user_id)

    @translate_storage_errors("add comment")
    def add_comment(self, user_id, post_id, content) -> Comment:
        """Create a comment from non-blank content on an existing post."""
        text = (content or "").strip()
        data = {"post_id": post_id, "content": content or ""}
        if not text:
            raise ValidationError("Comment cannot be empty.", field="content", data=data)
        if len(text) > COMMENT_MAX_LENGTH:
            raise ValidationError(
                f"Comment cannot be longer than {COMMENT_MAX_LENGTH} characters.",
                field="content",
                data=data,
            )
        self._require_user(user_id)
        self._require_post(post_id)
        return self.comment_repo.create(post_id=post_id, user_id=user_id, content=text)

    @translate_storage_errors("list comments")
    def list_comments(self, post_id, *, limit=None, offset=0):
        """Return comments for one post on demand, newest first."""
        self._require_post(post_id)
        return self.comment_repo.list_for_post(post_id, limit=limit, offset=offset)
