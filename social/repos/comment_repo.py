"""Repository helpers for comments."""

from typing import List, Optional

from social.db_accessor import DB_Accessor
from social.models.comment import Comment


class CommentRepo(DB_Accessor):
    def __init__(self) -> None:
        super().__init__(Comment)

    def list_for_post(self, post_id, *, limit: Optional[int] = None, offset: int = 0) -> List[Comment]:
        """Comments on a post, newest first, with their authors loaded."""
        qs = (
            self.model.objects.filter(post_id=post_id)
            .select_related("user")
            .order_by("-created_at", "-id")
        )
        return list(self.apply_slice(qs, offset=offset, limit=limit))
