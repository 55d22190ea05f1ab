from django import forms

from social.models.post import PostMedia
from .fields import BoundedImageField, IdListField


class PostForm(forms.Form):
    """Input for creating and editing posts; business rules live in PostService."""

    title = forms.CharField(required=False, strip=False)
    content = forms.CharField(
        required=False,
        widget=forms.Textarea(attrs={"rows": 4}),
    )
    category_ids = IdListField(required=False, label="Categories")
    image = BoundedImageField(required=False)

    def categories_submitted(self):
        """True when the request carried a category_ids key at all."""
        return "category_ids" in self.data


class PostMediaForm(forms.Form):
    """Extra media attached to an existing post."""

    url = forms.CharField(max_length=500)
    media_type = forms.ChoiceField(
        choices=PostMedia.MEDIA_TYPE_CHOICES,
        required=False,
    )

    def clean_media_type(self):
        return self.cleaned_data.get("media_type") or PostMedia.MEDIA_IMAGE
