from django.test import TestCase

from social.models import UserFollow
from social.repos.follow_repo import FollowRepo
from social.tests.helpers import make_user


class FollowRepoTests(TestCase):
    def setUp(self):
        self.repo = FollowRepo()
        self.alice = make_user(display_name="Alice")
        self.bob = make_user(display_name="Bob")
        self.cara = make_user(display_name="Cara")
        UserFollow.objects.create(follower=self.alice, followee=self.cara)
        UserFollow.objects.create(follower=self.alice, followee=self.bob)
        UserFollow.objects.create(follower=self.bob, followee=self.alice)

    def test_followees_ordered_by_display_name(self):
        self.assertEqual(self.repo.followees(self.alice.id), [self.bob, self.cara])

    def test_followee_ids(self):
        self.assertEqual(self.repo.followee_ids(self.alice.id), {self.bob.id, self.cara.id})
        self.assertEqual(self.repo.followee_ids(self.cara.id), set())

    def test_followers(self):
        self.assertEqual(self.repo.followers(self.alice.id), [self.bob])

    def test_follow_and_unfollow(self):
        self.repo.follow(follower_id=self.cara.id, followee_id=self.bob.id)
        self.assertTrue(self.repo.is_following(follower_id=self.cara.id, followee_id=self.bob.id))
        self.assertEqual(self.repo.unfollow(follower_id=self.cara.id, followee_id=self.bob.id), 1)
        self.assertFalse(self.repo.is_following(follower_id=self.cara.id, followee_id=self.bob.id))
