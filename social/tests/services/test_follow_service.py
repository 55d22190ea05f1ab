from django.test import TestCase

from social.exceptions import ConflictError, NotFoundError, ValidationError
from social.models import UserFollow
from social.services import FollowService
from social.tests.helpers import make_user


class FollowServiceTestCase(TestCase):
    def setUp(self):
        self.alice = make_user()
        self.bob = make_user()
        self.service = FollowService()

    def test_follow_creates_edge(self):
        edge = self.service.follow(self.alice.id, self.bob.id)
        self.assertEqual((edge.follower_id, edge.followee_id), (self.alice.id, self.bob.id))
        self.assertFalse(UserFollow.objects.filter(follower=self.bob, followee=self.alice).exists())

    def test_double_follow_is_conflict(self):
        self.service.follow(self.alice.id, self.bob.id)
        with self.assertRaises(ConflictError):
            self.service.follow(self.alice.id, self.bob.id)
        self.assertEqual(UserFollow.objects.count(), 1)

    def test_self_follow_rejected(self):
        with self.assertRaises(ValidationError):
            self.service.follow(self.alice.id, self.alice.id)
        self.assertFalse(UserFollow.objects.exists())

    def test_follow_unknown_user(self):
        with self.assertRaises(NotFoundError) as ctx:
            self.service.follow(self.alice.id, 999999)
        self.assertEqual(ctx.exception.field, "followee_id")

    def test_unfollow_removes_only_one_direction(self):
        UserFollow.objects.create(follower=self.alice, followee=self.bob)
        UserFollow.objects.create(follower=self.bob, followee=self.alice)
        self.assertTrue(self.service.unfollow(self.alice.id, self.bob.id))
        self.assertTrue(UserFollow.objects.filter(follower=self.bob, followee=self.alice).exists())

    def test_unfollow_when_not_following(self):
        self.assertFalse(self.service.unfollow(self.alice.id, self.bob.id))
