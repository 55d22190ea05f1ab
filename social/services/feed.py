"""Feed assembly used by the feed views."""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from django.core.exceptions import ImproperlyConfigured

from social.conf import GUEST_POLICY_ALL, GUEST_POLICY_CURATED, get_setting
from social.exceptions import ValidationError, translate_storage_errors
from social.repos.post_repo import PostRepo
from .social_graph import SocialGraphService

logger = logging.getLogger(__name__)

# keeps page * page_size well inside a 64-bit SQL offset
MAX_FEED_PAGE = 100_000


@dataclass
class FeedPage:
    """One page of posts plus the data the feed sidebar needs."""
    posts: List = field(default_factory=list)
    has_more: bool = False
    page: int = 0
    followees: List = field(default_factory=list)


class FeedService:
    """Encapsulate feed candidate selection, filtering and pagination."""

    def __init__(
        self,
        *,
        social_graph: SocialGraphService | None = None,
        post_repo: PostRepo | None = None,
        page_size: int | None = None,
        guest_policy: str | None = None,
    ) -> None:
        self.social_graph = social_graph or SocialGraphService()
        self.post_repo = post_repo or PostRepo()
        self._page_size = page_size
        self._guest_policy = guest_policy

    @property
    def page_size(self) -> int:
        size = self._page_size if self._page_size is not None else get_setting("FEED_PAGE_SIZE")
        if not isinstance(size, int) or size < 1:
            raise ImproperlyConfigured(f"FEED_PAGE_SIZE must be a positive integer, got {size!r}.")
        return size

    @property
    def guest_policy(self) -> str:
        return self._guest_policy or get_setting("GUEST_FEED_POLICY")

    # --- feed construction ----------------------------------------------
    @translate_storage_errors("get feed")
    def get_feed(self, viewer_id=None, page: int = 0, category_id: Optional[int] = None) -> FeedPage:
        """Return one page of the viewer's feed (or the guest feed)."""
        page = self._validate_page(page)
        if viewer_id is None:
            return self._guest_feed(page, category_id)

        followees = self.social_graph.list_followees(viewer_id)
        # an empty follow list falls back to every post instead of an empty feed
        author_ids = [user.id for user in followees] or None
        posts = self._page(page, category_id, author_ids=author_ids, viewer_id=viewer_id)
        return FeedPage(
            posts=posts,
            has_more=len(posts) == self.page_size,
            page=page,
            followees=followees,
        )

    @translate_storage_errors("load more feed posts")
    def load_more(self, viewer_id=None, page: int = 0, category_id: Optional[int] = None) -> FeedPage:
        """Incremental page fetch; skips loading the followee users themselves."""
        page = self._validate_page(page)
        if viewer_id is None:
            return self._guest_feed(page, category_id)
        author_ids = self.social_graph.list_followee_ids(viewer_id) or None
        posts = self._page(page, category_id, author_ids=author_ids, viewer_id=viewer_id)
        return FeedPage(posts=posts, has_more=len(posts) == self.page_size, page=page)

    @translate_storage_errors("discovery feed")
    def discovery_feed(self, category_id: Optional[int] = None, viewer_id=None) -> FeedPage:
        """Most-liked posts merged with the newest ones; a single unpaginated page."""
        top_n = get_setting("DISCOVERY_TOP_N")
        liked = self.post_repo.most_liked(top_n, category_id=category_id, viewer_id=viewer_id)
        recent = self.post_repo.most_recent(top_n, category_id=category_id, viewer_id=viewer_id)
        seen = set()
        merged = []
        for post in liked + recent:
            if post.id in seen:
                continue
            seen.add(post.id)
            merged.append(post)
        merged.sort(key=lambda p: (p.created_at, p.id), reverse=True)
        return FeedPage(posts=merged, has_more=False, page=0)

    # --- internal helpers -----------------------------------------------
    def _guest_feed(self, page: int, category_id) -> FeedPage:
        if self.guest_policy == GUEST_POLICY_CURATED:
            if page:
                return FeedPage(posts=[], has_more=False, page=page)
            return self.discovery_feed(category_id)
        if self.guest_policy != GUEST_POLICY_ALL:
            logger.warning("Unknown guest feed policy %r; using %r", self.guest_policy, GUEST_POLICY_ALL)
        posts = self._page(page, category_id)
        return FeedPage(posts=posts, has_more=len(posts) == self.page_size, page=page)

    def _page(self, page: int, category_id, *, author_ids=None, viewer_id=None) -> List:
        size = self.page_size
        return self.post_repo.list_for_feed(
            author_ids=author_ids,
            category_id=category_id,
            viewer_id=viewer_id,
            limit=size,
            offset=page * size,
        )

    def _validate_page(self, page) -> int:
        try:
            page = int(page)
        except (TypeError, ValueError):
            raise ValidationError("Page must be a whole number.", field="page", data={"page": page})
        if page < 0:
            raise ValidationError("Page cannot be negative.", field="page", data={"page": page})
        if page > MAX_FEED_PAGE:
            raise ValidationError(
                f"Page cannot be greater than {MAX_FEED_PAGE}.", field="page", data={"page": page}
            )
        return page
