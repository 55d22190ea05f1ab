from .post_forms import PostForm, PostMediaForm
from .user_forms import ProfileForm, SignUpForm

__all__ = ["PostForm", "PostMediaForm", "ProfileForm", "SignUpForm"]
