from django.test import TestCase
from django.urls import reverse

from social.models import Comment, PostLike
from social.tests.helpers import make_post, make_user


class ToggleLikeViewTests(TestCase):
    def setUp(self):
        self.user = make_user()
        self.post = make_post()
        self.url = reverse("toggle_like", args=[self.post.id])

    def test_requires_login(self):
        response = self.client.post(self.url)
        self.assertEqual(response.status_code, 403)
        self.assertFalse(PostLike.objects.exists())

    def test_like_then_unlike(self):
        self.client.force_login(self.user)
        first = self.client.post(self.url).json()
        self.assertEqual(first, {"success": True, "liked": True, "likes": 1})
        second = self.client.post(self.url).json()
        self.assertEqual(second, {"success": True, "liked": False, "likes": 0})

    def test_missing_post(self):
        self.client.force_login(self.user)
        response = self.client.post(reverse("toggle_like", args=[999999]))
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["error"], "not_found")


class CommentViewTests(TestCase):
    def setUp(self):
        self.user = make_user(display_name="Commenter")
        self.post = make_post()
        self.url = reverse("post_comments", args=[self.post.id])

    def test_add_comment(self):
        self.client.force_login(self.user)
        response = self.client.post(self.url, {"content": " Delicious "})
        self.assertEqual(response.status_code, 201)
        comment = response.json()["comment"]
        self.assertEqual(comment["content"], "Delicious")
        self.assertEqual(comment["author"]["display_name"], "Commenter")
        self.assertNotIn("user", comment)
        self.assertEqual(comment["post_id"], self.post.id)

    def test_blank_comment_echoes_input(self):
        self.client.force_login(self.user)
        response = self.client.post(self.url, {"content": "   "}, content_type="application/json")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["data"]["content"], "   ")
        self.assertFalse(Comment.objects.exists())

    def test_guests_can_read_comments(self):
        Comment.objects.create(user=self.user, post=self.post, content="one")
        body = self.client.get(self.url).json()
        self.assertEqual([c["content"] for c in body["comments"]], ["one"])
        self.assertFalse(body["has_more"])

    def test_bad_comments_page_is_validation_error(self):
        for page in ("two", "0"):
            response = self.client.get(self.url, {"page": page})
            self.assertEqual(response.status_code, 400)
            self.assertEqual(response.json()["field"], "page")

    def test_comments_paginate(self):
        Comment.objects.bulk_create(
            [Comment(user=self.user, post=self.post, content=f"c{i}") for i in range(51)]
        )
        body = self.client.get(self.url).json()
        self.assertEqual(len(body["comments"]), 50)
        self.assertTrue(body["has_more"])
        self.assertEqual(body["next_page"], 2)
        self.assertEqual(len(self.client.get(self.url, {"page": 2}).json()["comments"]), 1)


class SaveViewTests(TestCase):
    def test_save_and_list(self):
        user = make_user()
        post = make_post(title="Ramen")
        self.client.force_login(user)
        self.assertTrue(self.client.post(reverse("toggle_save", args=[post.id])).json()["saved"])
        saved = self.client.get(reverse("saved_posts")).json()
        self.assertEqual([p["title"] for p in saved], ["Ramen"])
