"""Repository helpers for fetching posts."""

from typing import Iterable, List, Optional

from django.db.models import Count, Exists, OuterRef, Prefetch, QuerySet, Value, BooleanField

from social.db_accessor import DB_Accessor
from social.models.category import Category
from social.models.like import PostLike
from social.models.post import Post

FEED_ORDERING = ("-created_at", "-id")


class PostRepo(DB_Accessor):
    """Repository for Post queries (feed, user-specific, detail)."""
    def __init__(self) -> None:
        """Initialise with the Post model."""
        super().__init__(Post)

    def find(self, post_id) -> Optional[Post]:
        """Return a bare post by id, or None when absent."""
        return self.first(id=post_id)

    def card_queryset(self, viewer_id=None) -> QuerySet:
        """Posts with author, tags, like count and the viewer's like flag.

        Comments are intentionally not loaded here.
        """
        qs = (
            self.model.objects.select_related("user")
            .prefetch_related(Prefetch("categories", queryset=Category.objects.order_by("name")))
            .annotate(like_count=Count("likes", distinct=True))
        )
        if viewer_id is None:
            return qs.annotate(viewer_has_liked=Value(False, output_field=BooleanField()))
        return qs.annotate(
            viewer_has_liked=Exists(
                PostLike.objects.filter(post_id=OuterRef("pk"), user_id=viewer_id)
            )
        )

    def list_for_feed(
        self,
        *,
        author_ids: Optional[Iterable[int]] = None,
        category_id: Optional[int] = None,
        viewer_id=None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[Post]:
        """Return one page of the feed, newest first.

        `author_ids=None` means every author; the category filter is a tag
        membership test.
        """
        qs = self.card_queryset(viewer_id)
        if author_ids is not None:
            qs = qs.filter(user_id__in=list(author_ids))
        if category_id is not None:
            qs = qs.filter(post_categories__category_id=category_id)
        qs = self.apply_ordering(qs, FEED_ORDERING)
        return list(self.apply_slice(qs, offset=offset, limit=limit))

    def most_liked(self, limit: int, *, category_id: Optional[int] = None, viewer_id=None) -> List[Post]:
        """Top posts by like count, recency breaking ties."""
        qs = self.card_queryset(viewer_id)
        if category_id is not None:
            qs = qs.filter(post_categories__category_id=category_id)
        return list(qs.order_by("-like_count", *FEED_ORDERING)[:limit])

    def most_recent(self, limit: int, *, category_id: Optional[int] = None, viewer_id=None) -> List[Post]:
        """Newest posts."""
        return self.list_for_feed(category_id=category_id, viewer_id=viewer_id, limit=limit)

    def list_for_user(self, user_id, *, viewer_id=None) -> List[Post]:
        """Return posts authored by a given user, newest first."""
        return self.list_for_feed(author_ids=[user_id], viewer_id=viewer_id)

    def list_by_ids(self, post_ids: Iterable[int], *, viewer_id=None) -> List[Post]:
        """Return the given posts as feed cards, newest first."""
        qs = self.card_queryset(viewer_id).filter(id__in=list(post_ids))
        return list(self.apply_ordering(qs, FEED_ORDERING))

    def detail(self, post_id, *, viewer_id=None) -> Optional[Post]:
        """Return a post card plus its media, or None when absent."""
        return (
            self.card_queryset(viewer_id)
            .prefetch_related("media")
            .filter(id=post_id)
            .first()
        )
