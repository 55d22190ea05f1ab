"""Model representing follower→followee relationships."""

from __future__ import annotations
from django.conf import settings
from django.db import models
from django.db.models import Q, F
from django.utils import timezone


class UserFollow(models.Model):
    """Directed follow edge: follower sees followee's posts in their feed."""
    follower = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="following",      # user.following -> edges this user created (outbound)
        db_column="follower_id",
    )
    followee = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="followers",      # user.followers -> edges pointing to this user (inbound)
        db_column="followee_id",
    )
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        """DB metadata and constraints for follow relationships."""
        db_table = "user_follow"
        constraints = [
            models.UniqueConstraint(fields=["follower", "followee"], name="uniq_user_follow_pair"),
            models.CheckConstraint(condition=~Q(follower=F("followee")), name="chk_user_follow_not_self"),
        ]
        indexes = [
            models.Index(fields=["follower"], name="user_follow_follower_idx"),
            models.Index(fields=["followee"], name="user_follow_followee_idx"),
        ]

    def __str__(self) -> str:
        """Readable representation for admin/debugging."""
        return f"UserFollow(follower={self.follower_id}, followee={self.followee_id})"
