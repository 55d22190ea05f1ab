from django.test import TestCase
from django.db import IntegrityError

from social.models import PostLike
from social.tests.helpers import make_user, make_post


class PostLikeModelTestCase(TestCase):
    def setUp(self):
        self.user_a = make_user()
        self.user_b = make_user()
        self.post = make_post(user=self.user_a)

    def test_user_can_like_a_post(self):
        like = PostLike.objects.create(user=self.user_b, post=self.post)

        self.assertEqual(like.user, self.user_b)
        self.assertEqual(like.post, self.post)
        self.assertIsNotNone(like.liked_at)

    def test_duplicate_like_violates_unique_constraint(self):
        PostLike.objects.create(user=self.user_b, post=self.post)

        with self.assertRaises(IntegrityError):
            PostLike.objects.create(user=self.user_b, post=self.post)

    def test_likes_count_uses_annotation_when_present(self):
        PostLike.objects.create(user=self.user_b, post=self.post)
        self.assertEqual(self.post.likes_count, 1)
        self.post.like_count = 7
        self.assertEqual(self.post.likes_count, 7)

    def test_string_representation(self):
        like = PostLike.objects.create(user=self.user_b, post=self.post)
        self.assertTrue(str(like))
