"""Model representing a user's like on a post."""

from django.conf import settings
from django.db import models
from django.utils import timezone


class PostLike(models.Model):
    """User like on a post; existence means liked."""
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        db_column='user_id',
        related_name='likes'
    )

    post = models.ForeignKey(
        "social.Post",
        on_delete=models.PROTECT,
        db_column='post_id',
        related_name='likes'
    )

    liked_at = models.DateTimeField(default=timezone.now)

    class Meta:
        """Enforce one like per user/post pair."""
        db_table = "post_like"
        constraints = [
            models.UniqueConstraint(fields=["user", "post"], name="uniq_post_like_user_post"),
        ]

    def __str__(self):
        """Readable representation for admin/debugging."""
        return f"{self.user_id} → {self.post_id}"
