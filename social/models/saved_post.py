"""Bookmark linking a user to a post they saved."""

from django.conf import settings
from django.db import models
from django.utils import timezone


class SavedPost(models.Model):
    """User bookmark of a post."""
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="saved_posts",
        db_column="user_id",
    )

    post = models.ForeignKey(
        "social.Post",
        on_delete=models.PROTECT,
        related_name="saved_by",
        db_column="post_id",
    )

    saved_at = models.DateTimeField(default=timezone.now)

    class Meta:
        """DB metadata and constraints for SavedPost."""
        db_table = "saved_post"
        constraints = [
            models.UniqueConstraint(fields=["user", "post"], name="uniq_saved_post_user_post"),
        ]
        indexes = [
            models.Index(fields=["user"], name="saved_post_user_id_idx"),
        ]

    def __str__(self) -> str:
        """Readable label for admin/debugging."""
        return f"SavedPost(user={self.user_id}, post={self.post_id})"
