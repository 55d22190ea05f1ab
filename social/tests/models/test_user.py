from django.test import TestCase, override_settings

from social.tests.helpers import make_user


class UserModelTests(TestCase):
    def test_display_label_falls_back_to_username(self):
        user = make_user(email="nameless@example.org", display_name="")
        self.assertEqual(user.display_label, "nameless@example.org")

    def test_display_label_prefers_display_name(self):
        user = make_user(display_name="Chef Ana")
        self.assertEqual(user.display_label, "Chef Ana")

    def test_avatar_url_uses_uploaded_picture(self):
        user = make_user(profile_picture_url="/media/uploads/profile-pictures/a.png")
        self.assertEqual(user.avatar_url, "/media/uploads/profile-pictures/a.png")

    @override_settings(FOODMEDIA={"DEFAULT_PROFILE_PICTURE": "https://example.com/default-profile.jpg"})
    def test_avatar_url_falls_back_to_gravatar_for_placeholder(self):
        user = make_user(profile_picture_url="https://example.com/default-profile.jpg")
        self.assertFalse(user.has_custom_picture())
        self.assertIn("gravatar.com", user.avatar_url)

    def test_new_user_profile_incomplete_by_default(self):
        user = make_user(is_profile_complete=False)
        self.assertFalse(user.is_profile_complete)
        self.assertEqual(user.bio, "")
