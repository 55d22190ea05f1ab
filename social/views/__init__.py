from .feed_views import *
from .post_views import *
from .interaction_views import *
from .profile_views import *
from .social_views import *
