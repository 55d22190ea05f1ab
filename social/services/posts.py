"""Service helpers for post creation, updates, deletion and media."""

import logging

from django.db import transaction

from social.conf import get_setting
from social.exceptions import (
    AuthorizationError,
    NotFoundError,
    ValidationError,
    translate_storage_errors,
)
from social.models.comment import Comment
from social.models.like import PostLike
from social.models.post import Post, PostMedia
from social.models.saved_post import SavedPost
from social.repos.category_repo import CategoryRepo
from social.repos.post_repo import PostRepo
from social.repos.user_repo import UserRepo
from social.uploads import store_upload

logger = logging.getLogger(__name__)

TITLE_MAX_LENGTH = 200
MEDIA_TYPES = {PostMedia.MEDIA_IMAGE, PostMedia.MEDIA_VIDEO}


class PostService:
    """Encapsulate post lifecycle operations. Only the owner may mutate a post."""

    def __init__(self, *, post_repo=None, category_repo=None, user_repo=None):
        self.post_repo = post_repo or PostRepo()
        self.category_repo = category_repo or CategoryRepo()
        self.user_repo = user_repo or UserRepo()

    # --- validation -------------------------------------------------------
    def _clean_title(self, title, data):
        title = (title or "").strip()
        if not title:
            raise ValidationError("Title is required.", field="title", data=data)
        if len(title) > TITLE_MAX_LENGTH:
            raise ValidationError(
                f"Title cannot be longer than {TITLE_MAX_LENGTH} characters.",
                field="title",
                data=data,
            )
        return title

    def _clean_category_ids(self, category_ids, data):
        """De-duplicate category ids and reject unknown ones."""
        try:
            wanted = {int(cid) for cid in (category_ids or ())}
        except (TypeError, ValueError):
            raise ValidationError("Categories must be ids.", field="category_ids", data=data)
        missing = wanted - self.category_repo.existing_ids(wanted)
        if missing:
            raise ValidationError(
                "Unknown categories: " + ", ".join(str(cid) for cid in sorted(missing)),
                field="category_ids",
                data=data,
            )
        return wanted

    def _owned_post(self, user_id, post_id):
        post = self.post_repo.find(post_id)
        if post is None:
            raise NotFoundError("Post not found.", field="post_id", data={"post_id": post_id})
        if post.user_id != user_id:
            logger.warning("User %s tried to modify post %s owned by %s", user_id, post_id, post.user_id)
            raise AuthorizationError("You can only change your own posts.", data={"post_id": post_id})
        return post

    def _store_image(self, image):
        return store_upload(image, get_setting("POST_UPLOAD_DIR"))

    # --- lifecycle --------------------------------------------------------
    @translate_storage_errors("create post")
    def create_post(self, user_id, title, content=None, category_ids=(), image=None) -> Post:
        """Create and return a post with its category tags."""
        data = {"title": title or "", "content": content or "", "category_ids": list(category_ids or ())}
        title = self._clean_title(title, data)
        wanted = self._clean_category_ids(category_ids, data)
        if not self.user_repo.exists(id=user_id):
            raise NotFoundError("User not found.", field="user_id", data=data)

        image_url = self._store_image(image) if image else ""
        with transaction.atomic():
            post = self.post_repo.create(
                user_id=user_id,
                title=title,
                content=content or "",
                main_image_url=image_url,
            )
            self.category_repo.assign(post, wanted)
        logger.info("User %s created post %s", user_id, post.id)
        return post

    @translate_storage_errors("update post")
    def update_post(self, user_id, post_id, title, content=None, image=None, category_ids=None) -> Post:
        """Update an existing post owned by `user_id`.

        The image is kept unless a new one is uploaded; tags are replaced
        only when `category_ids` is given.
        """
        data = {"post_id": post_id, "title": title or "", "content": content or ""}
        post = self._owned_post(user_id, post_id)
        title = self._clean_title(title, data)
        wanted = None
        if category_ids is not None:
            data["category_ids"] = list(category_ids)
            wanted = self._clean_category_ids(category_ids, data)

        if image:
            post.main_image_url = self._store_image(image)
        post.title = title
        post.content = content or ""
        with transaction.atomic():
            post.save(update_fields=["title", "content", "main_image_url"])
            if wanted is not None:
                self.category_repo.clear(post.id)
                self.category_repo.assign(post, wanted)
        return post

    @translate_storage_errors("delete post")
    def delete_post(self, user_id, post_id) -> None:
        """Delete a post and every row that depends on it, atomically."""
        post = self._owned_post(user_id, post_id)
        with transaction.atomic():
            PostLike.objects.filter(post_id=post.id).delete()
            Comment.objects.filter(post_id=post.id).delete()
            PostMedia.objects.filter(post_id=post.id).delete()
            SavedPost.objects.filter(post_id=post.id).delete()
            self.category_repo.clear(post.id)
            post.delete()
        logger.info("User %s deleted post %s", user_id, post_id)

    @translate_storage_errors("attach media")
    def attach_media(self, user_id, post_id, url, media_type=PostMedia.MEDIA_IMAGE) -> PostMedia:
        """Attach an extra image or video URL to an owned post."""
        post = self._owned_post(user_id, post_id)
        data = {"post_id": post_id, "url": url or "", "media_type": media_type}
        if not (url or "").strip():
            raise ValidationError("Media URL is required.", field="url", data=data)
        if media_type not in MEDIA_TYPES:
            raise ValidationError("Media type must be image or video.", field="media_type", data=data)
        return PostMedia.objects.create(post=post, url=url.strip(), media_type=media_type)

    # --- reads ------------------------------------------------------------
    @translate_storage_errors("get post")
    def get_post(self, post_id, viewer_id=None) -> Post:
        """Return a post with author, tags, media and like count."""
        post = self.post_repo.detail(post_id, viewer_id=viewer_id)
        if post is None:
            raise NotFoundError("Post not found.", field="post_id", data={"post_id": post_id})
        return post

    @translate_storage_errors("list user posts")
    def list_user_posts(self, user_id, viewer_id=None):
        """Posts by one user, newest first."""
        if not self.user_repo.exists(id=user_id):
            raise NotFoundError("User not found.", field="user_id", data={"user_id": user_id})
        return self.post_repo.list_for_user(user_id, viewer_id=viewer_id)

    def list_categories(self):
        return self.category_repo.list_all()
