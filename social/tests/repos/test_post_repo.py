from django.test import TestCase

from social.models import PostLike
from social.repos.post_repo import PostRepo
from social.tests.helpers import make_category, make_post, make_user


class PostRepoTests(TestCase):
    def setUp(self):
        self.repo = PostRepo()
        self.author = make_user()
        self.other = make_user()
        self.dessert = make_category("Dessert")
        self.vegan = make_category("Vegan")
        self.old = make_post(user=self.author, title="old", minutes=1, categories=[self.dessert, self.vegan])
        self.mid = make_post(user=self.other, title="mid", minutes=2, categories=[self.vegan])
        self.new = make_post(user=self.author, title="new", minutes=3)

    def test_list_for_feed_newest_first(self):
        posts = self.repo.list_for_feed()
        self.assertEqual([p.title for p in posts], ["new", "mid", "old"])

    def test_list_for_feed_ties_broken_by_id_desc(self):
        twin = make_post(user=self.author, title="twin", minutes=3)
        posts = self.repo.list_for_feed(limit=2)
        self.assertEqual([p.id for p in posts], [twin.id, self.new.id])

    def test_list_for_feed_filters_authors(self):
        posts = self.repo.list_for_feed(author_ids=[self.other.id])
        self.assertEqual(posts, [self.mid])

    def test_category_filter_is_membership_without_duplicates(self):
        posts = self.repo.list_for_feed(category_id=self.vegan.id)
        self.assertEqual([p.title for p in posts], ["mid", "old"])

    def test_offset_and_limit(self):
        posts = self.repo.list_for_feed(limit=1, offset=1)
        self.assertEqual(posts, [self.mid])

    def test_cards_carry_like_count_and_viewer_flag(self):
        PostLike.objects.create(user=self.other, post=self.old)
        PostLike.objects.create(user=self.author, post=self.old)

        cards = {p.id: p for p in self.repo.list_for_feed(viewer_id=self.other.id)}
        self.assertEqual(cards[self.old.id].like_count, 2)
        self.assertTrue(cards[self.old.id].viewer_has_liked)
        self.assertFalse(cards[self.new.id].viewer_has_liked)

    def test_guest_cards_never_liked(self):
        PostLike.objects.create(user=self.other, post=self.old)
        cards = self.repo.list_for_feed()
        self.assertFalse(any(p.viewer_has_liked for p in cards))

    def test_like_count_not_inflated_by_category_join(self):
        PostLike.objects.create(user=self.other, post=self.old)
        posts = self.repo.list_for_feed(category_id=self.dessert.id)
        self.assertEqual(posts[0].like_count, 1)

    def test_most_liked_orders_by_count_then_recency(self):
        PostLike.objects.create(user=self.other, post=self.old)
        posts = self.repo.most_liked(2)
        self.assertEqual([p.title for p in posts], ["old", "new"])

    def test_detail_missing_returns_none(self):
        self.assertIsNone(self.repo.detail(999999))
