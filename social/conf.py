"""Access to the FOODMEDIA policy settings with built-in defaults."""

from django.conf import settings

DEFAULTS = {
    "FEED_PAGE_SIZE": 3,
    "GUEST_FEED_POLICY": "all",
    "DISCOVERY_TOP_N": 5,
    "DEFAULT_PROFILE_PICTURE": "https://example.com/default-profile.jpg",
    "POST_UPLOAD_DIR": "uploads/posts",
    "PROFILE_UPLOAD_DIR": "uploads/profile-pictures",
}

GUEST_POLICY_ALL = "all"
GUEST_POLICY_CURATED = "curated"


def get_setting(name):
    """Return a FOODMEDIA setting, falling back to the app default."""
    overrides = getattr(settings, "FOODMEDIA", None) or {}
    if name in overrides:
        return overrides[name]
    return DEFAULTS[name]
