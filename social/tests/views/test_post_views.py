from django.test import TestCase
from django.urls import reverse

from social.models import Post, PostMedia
from social.tests.helpers import make_category, make_post, make_user


class PostCrudViewTests(TestCase):
    def setUp(self):
        self.owner = make_user()
        self.other = make_user()
        self.category = make_category("Dinner")

    def test_create_post(self):
        self.client.force_login(self.owner)
        response = self.client.post(
            reverse("post_create"),
            {"title": "Curry", "content": "Spicy", "category_ids": [self.category.id]},
        )
        self.assertEqual(response.status_code, 201)
        body = response.json()
        self.assertEqual(body["title"], "Curry")
        self.assertEqual(body["main_image_url"], "")
        self.assertEqual(body["categories"], [{"id": self.category.id, "name": "Dinner"}])
        self.assertEqual(body["media"], [])

    def test_create_post_json(self):
        self.client.force_login(self.owner)
        response = self.client.post(
            reverse("post_create"),
            {"title": "Salad", "category_ids": [self.category.id]},
            content_type="application/json",
        )
        self.assertEqual(response.status_code, 201)
        self.assertEqual(len(response.json()["categories"]), 1)

    def test_create_without_title_echoes_input(self):
        self.client.force_login(self.owner)
        response = self.client.post(reverse("post_create"), {"title": "", "content": "kept"})
        self.assertEqual(response.status_code, 400)
        body = response.json()
        self.assertEqual(body["field"], "title")
        self.assertEqual(body["data"]["content"], "kept")
        self.assertFalse(Post.objects.exists())

    def test_create_requires_login(self):
        response = self.client.post(reverse("post_create"), {"title": "Nope"})
        self.assertEqual(response.status_code, 403)

    def test_edit_by_non_owner_forbidden(self):
        post = make_post(user=self.owner, title="Mine")
        self.client.force_login(self.other)
        response = self.client.post(reverse("post_edit", args=[post.id]), {"title": "Yours"})
        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.json()["error"], "forbidden")
        post.refresh_from_db()
        self.assertEqual(post.title, "Mine")

    def test_edit_without_categories_keeps_tags(self):
        post = make_post(user=self.owner, categories=[self.category])
        self.client.force_login(self.owner)
        response = self.client.post(reverse("post_edit", args=[post.id]), {"title": "Renamed"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["title"], "Renamed")
        self.assertEqual(len(response.json()["categories"]), 1)

    def test_edit_with_empty_categories_clears_tags(self):
        post = make_post(user=self.owner, categories=[self.category])
        self.client.force_login(self.owner)
        response = self.client.post(
            reverse("post_edit", args=[post.id]), {"title": "Plain", "category_ids": ""}
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["categories"], [])
        self.assertFalse(post.categories.exists())

    def test_delete(self):
        post = make_post(user=self.owner)
        self.client.force_login(self.owner)
        response = self.client.post(reverse("post_delete", args=[post.id]))
        self.assertEqual(response.json(), {"success": True})
        self.assertFalse(Post.objects.exists())

    def test_detail_and_media(self):
        post = make_post(user=self.owner)
        self.client.force_login(self.owner)
        response = self.client.post(
            reverse("post_add_media", args=[post.id]),
            {"url": "https://cdn.example.org/clip.mp4", "media_type": "video"},
        )
        self.assertEqual(response.status_code, 201)
        self.assertEqual(PostMedia.objects.get().media_type, "video")
        detail = self.client.get(reverse("post_detail", args=[post.id])).json()
        self.assertEqual(detail["media"][0]["url"], "https://cdn.example.org/clip.mp4")

    def test_detail_missing(self):
        response = self.client.get(reverse("post_detail", args=[999999]))
        self.assertEqual(response.status_code, 404)
        self.assertEqual(
            set(response.json()),
            {"error", "detail", "field", "data"},
        )
