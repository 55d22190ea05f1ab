"""
Post + PostMedia models

Post:
- The main item a user publishes: title, free-text content and a main image.
- `user` is the owner; only the owner may edit or delete the post.
- `main_image_url` holds the stored upload URL, or "" when there is none.
- `categories` are tags assigned through PostCategory.

PostMedia:
- Extra images/videos attached to a post beyond the main image.

Comments, likes, saves and media all restrict deletion of a post, so
PostService.delete_post removes them explicitly before the post itself.
"""

from django.conf import settings
from django.db import models
from django.utils import timezone


class Post(models.Model):
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="posts",
        db_column="user_id",
    )

    title = models.CharField(max_length=200)
    content = models.TextField(blank=True, default="")
    main_image_url = models.CharField(max_length=500, blank=True, default="")

    created_at = models.DateTimeField(default=timezone.now, db_index=True)

    categories = models.ManyToManyField(
        "social.Category",
        through="social.PostCategory",
        related_name="posts",
        blank=True,
    )

    class Meta:
        db_table = "post"
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return self.title

    @property
    def likes_count(self):
        annotated = getattr(self, "like_count", None)
        if annotated is not None:
            return annotated
        return self.likes.count()


class PostMedia(models.Model):
    MEDIA_IMAGE = "image"
    MEDIA_VIDEO = "video"

    MEDIA_TYPE_CHOICES = [
        (MEDIA_IMAGE, "Image"),
        (MEDIA_VIDEO, "Video"),
    ]

    post = models.ForeignKey(
        Post,
        on_delete=models.PROTECT,
        related_name="media",
        db_column="post_id",
    )
    url = models.CharField(max_length=500)
    media_type = models.CharField(max_length=10, choices=MEDIA_TYPE_CHOICES, default=MEDIA_IMAGE)

    class Meta:
        db_table = "post_media"
        ordering = ["id"]

    def __str__(self):
        return f"{self.media_type} for {self.post_id}"
