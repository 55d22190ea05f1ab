"""Registration, profile completion and public profile lookups."""

import logging
from dataclasses import dataclass, field
from typing import List

from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password
from django.core.validators import validate_email
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import IntegrityError, transaction

from social.conf import get_setting
from social.exceptions import ConflictError, NotFoundError, ValidationError, translate_storage_errors
from social.repos.post_repo import PostRepo
from social.repos.user_repo import UserRepo
from social.uploads import store_upload

logger = logging.getLogger(__name__)

DISPLAY_NAME_MAX_LENGTH = 100


@dataclass
class ProfileView:
    user: object
    posts: List = field(default_factory=list)


class ProfileService:
    """Apply profile fields to users and read public profiles."""

    def __init__(self, *, user_repo=None, post_repo=None):
        self.user_repo = user_repo or UserRepo()
        self.post_repo = post_repo or PostRepo()

    def _clean_display_name(self, display_name, data):
        display_name = (display_name or "").strip()
        if not display_name:
            raise ValidationError("Display name is required.", field="display_name", data=data)
        if len(display_name) > DISPLAY_NAME_MAX_LENGTH:
            raise ValidationError(
                f"Display name cannot be longer than {DISPLAY_NAME_MAX_LENGTH} characters.",
                field="display_name",
                data=data,
            )
        return display_name

    def _get_user(self, user_id):
        user = self.user_repo.find(user_id)
        if user is None:
            raise NotFoundError("User not found.", field="user_id", data={"user_id": user_id})
        return user

    def _apply_profile(self, user, display_name, bio, picture, *, keep_picture):
        user.display_name = display_name
        user.bio = bio or ""
        if picture:
            user.profile_picture_url = store_upload(picture, get_setting("PROFILE_UPLOAD_DIR"))
        elif not (keep_picture and user.profile_picture_url):
            user.profile_picture_url = get_setting("DEFAULT_PROFILE_PICTURE")
        user.is_profile_complete = True

    @translate_storage_errors("complete profile")
    def complete_profile(self, user_id, display_name, bio=None, picture=None):
        """Set the profile fields and mark the profile complete.

        Without an uploaded picture the placeholder picture is used.
        """
        data = {"display_name": display_name or "", "bio": bio or ""}
        display_name = self._clean_display_name(display_name, data)
        user = self._get_user(user_id)
        self._apply_profile(user, display_name, bio, picture, keep_picture=False)
        user.save(update_fields=["display_name", "bio", "profile_picture_url", "is_profile_complete"])
        return user

    @translate_storage_errors("edit profile")
    def edit_profile(self, user_id, display_name, bio=None, picture=None):
        """Like complete_profile, but the current picture survives when none is uploaded."""
        data = {"display_name": display_name or "", "bio": bio or ""}
        display_name = self._clean_display_name(display_name, data)
        user = self._get_user(user_id)
        self._apply_profile(user, display_name, bio, picture, keep_picture=True)
        user.save(update_fields=["display_name", "bio", "profile_picture_url", "is_profile_complete"])
        return user

    @translate_storage_errors("register")
    def register(self, email, password, display_name, bio=None, picture=None):
        """Create an account whose username is its email, with a complete profile."""
        email = (email or "").strip()
        data = {"email": email, "display_name": display_name or "", "bio": bio or ""}
        try:
            validate_email(email)
        except DjangoValidationError:
            raise ValidationError("Enter a valid email address.", field="email", data=data)
        try:
            validate_password(password or "")
        except DjangoValidationError as exc:
            raise ValidationError(" ".join(exc.messages), field="password", data=data)
        display_name = self._clean_display_name(display_name, data)
        if self.user_repo.email_taken(email):
            raise ConflictError("This email is already registered.", field="email", data=data)

        user_model = get_user_model()
        try:
            with transaction.atomic():
                user = user_model.objects.create_user(username=email, email=email, password=password)
                self._apply_profile(user, display_name, bio, picture, keep_picture=False)
                user.save()
        except IntegrityError:
            raise ConflictError("This email is already registered.", field="email", data=data)
        logger.info("Registered user %s", user.id)
        return user

    @translate_storage_errors("get profile")
    def get_profile(self, user_id, viewer_id=None) -> ProfileView:
        """Return a user's public profile together with their posts."""
        user = self._get_user(user_id)
        posts = self.post_repo.list_for_user(user.id, viewer_id=viewer_id)
        return ProfileView(user=user, posts=posts)
