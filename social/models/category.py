"""Category reference data and the post/category join table."""

from django.db import models


class Category(models.Model):
    """Named food category (Dessert, Breakfast, ...) seeded out of band."""
    name = models.CharField(max_length=50, unique=True)

    class Meta:
        db_table = "category"
        ordering = ["name"]
        verbose_name_plural = "categories"

    def __str__(self):
        return self.name


class PostCategory(models.Model):
    """Tag assignment of a category to a post."""
    post = models.ForeignKey(
        "social.Post",
        on_delete=models.CASCADE,
        related_name="post_categories",
        db_column="post_id",
    )
    category = models.ForeignKey(
        Category,
        on_delete=models.PROTECT,
        related_name="post_categories",
        db_column="category_id",
    )

    class Meta:
        """One tag per post/category pair."""
        db_table = "post_category"
        constraints = [
            models.UniqueConstraint(fields=["post", "category"], name="uniq_post_category"),
        ]

    def __str__(self):
        return f"PostCategory(post={self.post_id}, category={self.category_id})"
