from .user import User
from .category import Category, PostCategory
from .post import Post, PostMedia
from .comment import Comment
from .like import PostLike
from .saved_post import SavedPost
from .follow import UserFollow

__all__ = [
    "User",
    "Category",
    "PostCategory",
    "Post",
    "PostMedia",
    "Comment",
    "PostLike",
    "SavedPost",
    "UserFollow",
]
