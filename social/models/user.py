"""Custom user model with profile metadata and avatar helpers."""

from django.contrib.auth.models import AbstractUser
from django.core.validators import MaxLengthValidator
from django.db import models
from libgravatar import Gravatar

from social.conf import get_setting


class User(AbstractUser):
    """Account plus the public profile shown next to posts and comments."""

    email = models.EmailField(unique=True, blank=False)
    display_name = models.CharField(max_length=100, blank=True)
    bio = models.TextField(
        max_length=500,
        blank=True,
        default="",
        help_text="short user bio shown on profile",
        validators=[MaxLengthValidator(500)]
    )
    profile_picture_url = models.CharField(max_length=500, blank=True, default="")
    is_profile_complete = models.BooleanField(default=False)

    class Meta:
        """Default ordering for users."""
        ordering = ['display_name', 'username']

    @property
    def display_label(self):
        """Display name, or the username when no display name is set."""
        return self.display_name or self.username

    def gravatar(self, size=120):
        """Return gravatar URL for the user's email."""
        gravatar_object = Gravatar(self.email)
        return gravatar_object.get_image(size=size, default='mp')

    def has_custom_picture(self):
        """True when the user uploaded a picture rather than using the placeholder."""
        placeholder = get_setting("DEFAULT_PROFILE_PICTURE")
        return bool(self.profile_picture_url) and self.profile_picture_url != placeholder

    @property
    def avatar_url(self):
        """Uploaded picture URL or a gravatar fallback."""
        if self.has_custom_picture():
            return self.profile_picture_url
        return self.gravatar(size=200)
