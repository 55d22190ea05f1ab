"""Repository helpers for category reference data."""

from typing import Iterable, List, Set

from social.db_accessor import DB_Accessor
from social.models.category import Category, PostCategory


class CategoryRepo(DB_Accessor):
    """Read access to categories plus tag assignment for posts."""
    def __init__(self) -> None:
        super().__init__(Category)

    def list_all(self) -> List[Category]:
        return list(self.model.objects.order_by("name"))

    def existing_ids(self, category_ids: Iterable[int]) -> Set[int]:
        """Return the subset of `category_ids` that exist."""
        return set(
            self.model.objects.filter(id__in=list(category_ids)).values_list("id", flat=True)
        )

    def assign(self, post, category_ids: Iterable[int]) -> None:
        """Tag `post` with each category id, ignoring ones already assigned."""
        PostCategory.objects.bulk_create(
            [PostCategory(post=post, category_id=cid) for cid in category_ids],
            ignore_conflicts=True,
        )

    def clear(self, post_id) -> int:
        """Remove all tags from a post."""
        count, _ = PostCategory.objects.filter(post_id=post_id).delete()
        return count
