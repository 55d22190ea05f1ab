from unittest.mock import patch

from django.db import DatabaseError
from django.test import TestCase, override_settings

from social.exceptions import ConflictError, NotFoundError, StorageError, ValidationError
from social.models import User
from social.repos.post_repo import PostRepo
from social.services import FeedService, ProfileService
from social.tests.helpers import make_post, make_user

PLACEHOLDER = "https://example.com/default-profile.jpg"


@override_settings(FOODMEDIA={"DEFAULT_PROFILE_PICTURE": PLACEHOLDER})
class ProfileServiceTests(TestCase):
    def setUp(self):
        self.service = ProfileService()
        self.user = make_user(is_profile_complete=False, display_name="")

    def test_complete_profile_uses_placeholder(self):
        user = self.service.complete_profile(self.user.id, "Chef Sam", "I cook.")
        self.assertTrue(user.is_profile_complete)
        self.assertEqual(user.profile_picture_url, PLACEHOLDER)
        self.user.refresh_from_db()
        self.assertEqual(self.user.display_name, "Chef Sam")

    def test_complete_profile_requires_display_name(self):
        with self.assertRaises(ValidationError):
            self.service.complete_profile(self.user.id, "  ")
        self.user.refresh_from_db()
        self.assertFalse(self.user.is_profile_complete)

    def test_edit_profile_keeps_picture(self):
        self.user.profile_picture_url = "/media/me.png"
        self.user.save()
        user = self.service.edit_profile(self.user.id, "New Name", "")
        self.assertEqual(user.profile_picture_url, "/media/me.png")
        self.assertEqual(user.display_name, "New Name")

    def test_complete_profile_unknown_user(self):
        with self.assertRaises(NotFoundError):
            self.service.complete_profile(999999, "Ghost")

    def test_register_creates_complete_account(self):
        user = self.service.register("cook@example.org", "secret1", "Cook")
        self.assertEqual(user.username, "cook@example.org")
        self.assertTrue(user.check_password("secret1"))
        self.assertTrue(user.is_profile_complete)

    def test_register_duplicate_email(self):
        make_user(email="taken@example.org")
        with self.assertRaises(ConflictError):
            self.service.register("TAKEN@example.org", "secret1", "Dup")

    def test_register_short_password(self):
        with self.assertRaises(ValidationError) as ctx:
            self.service.register("new@example.org", "123", "New")
        self.assertEqual(ctx.exception.field, "password")
        self.assertNotIn("password", ctx.exception.data)
        self.assertFalse(User.objects.filter(email="new@example.org").exists())

    @override_settings(AUTH_PASSWORD_VALIDATORS=[
        {"NAME": "django.contrib.auth.password_validation.NumericPasswordValidator"},
    ])
    def test_register_uses_configured_password_validators(self):
        with self.assertRaises(ValidationError) as ctx:
            self.service.register("digits@example.org", "12345678", "Digits")
        self.assertEqual(ctx.exception.field, "password")
        self.assertIn("entirely numeric", ctx.exception.message)
        self.assertTrue(self.service.register("letters@example.org", "abc", "Letters").check_password("abc"))

    def test_register_bad_email(self):
        with self.assertRaises(ValidationError):
            self.service.register("not-an-email", "secret1", "New")

    def test_get_profile_lists_posts(self):
        post = make_post(user=self.user)
        profile = self.service.get_profile(self.user.id)
        self.assertEqual(profile.user, self.user)
        self.assertEqual([p.id for p in profile.posts], [post.id])


class StorageErrorTests(TestCase):
    def test_database_failure_becomes_storage_error(self):
        with patch.object(PostRepo, "list_for_feed", side_effect=DatabaseError("disk I/O error")):
            with self.assertLogs("social.exceptions", level="ERROR"):
                with self.assertRaises(StorageError) as ctx:
                    FeedService().get_feed(None)
        self.assertIsInstance(ctx.exception.__cause__, DatabaseError)
        self.assertEqual(ctx.exception.status_code, 503)
