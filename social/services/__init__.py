from .social_graph import SocialGraphService
from .follow import FollowService
from .feed import FeedPage, FeedService
from .interactions import InteractionService, LikeResult, SaveResult
from .posts import PostService
from .profile import ProfileService, ProfileView

__all__ = [
    "SocialGraphService",
    "FollowService",
    "FeedPage",
    "FeedService",
    "InteractionService",
    "LikeResult",
    "SaveResult",
    "PostService",
    "ProfileService",
    "ProfileView",
]
