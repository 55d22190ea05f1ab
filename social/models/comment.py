"""Model for user comments on posts."""

from django.conf import settings
from django.db import models
from django.utils import timezone


class Comment(models.Model):
    """User-authored comment on a post."""
    post = models.ForeignKey(
        "social.Post",
        on_delete=models.PROTECT,
        db_column='post_id',
        related_name='comments'
    )

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        db_column='user_id',
        related_name='comments'
    )

    # text (1–2000)
    content = models.TextField(max_length=2000)

    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        """DB table name and default ordering for comments."""
        db_table = "comment"
        ordering = ["-created_at", "-id"]

    def __str__(self):
        """Readable identifier for admin/debugging."""
        return f"Comment by {self.user_id} on {self.post_id}"
