from django.test import TestCase

from social.exceptions import NotFoundError
from social.models import UserFollow
from social.services import SocialGraphService
from social.tests.helpers import make_user


class SocialGraphServiceTests(TestCase):
    def setUp(self):
        self.service = SocialGraphService()
        self.alice = make_user(display_name="Alice")
        self.bob = make_user(display_name="Bob")
        self.cara = make_user(display_name="Cara")
        UserFollow.objects.create(follower=self.alice, followee=self.bob)
        UserFollow.objects.create(follower=self.alice, followee=self.cara)

    def test_list_followees(self):
        self.assertEqual(self.service.list_followees(self.alice.id), [self.bob, self.cara])

    def test_list_followee_ids(self):
        self.assertEqual(self.service.list_followee_ids(self.alice.id), {self.bob.id, self.cara.id})

    def test_no_followees_is_empty(self):
        self.assertEqual(self.service.list_followees(self.bob.id), [])
        self.assertEqual(self.service.list_followee_ids(self.bob.id), set())

    def test_follow_is_not_reciprocal(self):
        self.assertEqual(self.service.list_followers(self.bob.id), [self.alice])
        self.assertFalse(self.service.is_following(self.bob.id, self.alice.id))

    def test_unknown_user_raises_not_found(self):
        with self.assertRaises(NotFoundError):
            self.service.list_followees(999999)
        with self.assertRaises(NotFoundError):
            self.service.list_followee_ids(999999)
