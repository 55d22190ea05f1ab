import io
from datetime import timedelta
from itertools import count

from django.core.files.uploadedfile import SimpleUploadedFile
from django.utils import timezone
from PIL import Image

from social.models import Category, Post, PostCategory, User

_sequence = count(1)
BASE_TIME = timezone.now() - timedelta(days=1)


def make_user(**kwargs):
    """Create a user with a complete profile unless told otherwise."""
    n = next(_sequence)
    email = kwargs.pop("email", f"user{n}@example.org")
    return User.objects.create_user(
        username=kwargs.pop("username", email),
        email=email,
        password=kwargs.pop("password", "Password123"),
        display_name=kwargs.pop("display_name", f"User {n}"),
        is_profile_complete=kwargs.pop("is_profile_complete", True),
        **kwargs,
    )


def make_category(name):
    category, _ = Category.objects.get_or_create(name=name)
    return category


def make_post(*, user=None, title="test post", content="desc", minutes=0, categories=(), **extra):
    """
    creates and returns a post. `minutes` shifts created_at forward from a fixed
    base time so tests control recency explicitly.
    """
    if user is None:
        user = make_user()
    post = Post.objects.create(
        user=user,
        title=title,
        content=content,
        created_at=BASE_TIME + timedelta(minutes=minutes),
        **extra,
    )
    for category in categories:
        PostCategory.objects.create(post=post, category=category)
    return post


def make_image_upload(name="dish.png", size=(4, 4)):
    """A small valid PNG wrapped as an upload."""
    buffer = io.BytesIO()
    Image.new("RGB", size, color=(200, 120, 40)).save(buffer, format="PNG")
    return SimpleUploadedFile(name, buffer.getvalue(), content_type="image/png")
