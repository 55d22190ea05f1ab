"""Forms for sign up and profile completion/editing."""

from django import forms

from .fields import BoundedImageField


class ProfileForm(forms.Form):
    """Display name, bio and optional picture upload."""

    display_name = forms.CharField(required=False, strip=False)
    bio = forms.CharField(
        required=False,
        max_length=500,
        widget=forms.Textarea(attrs={"rows": 3, "style": "resize: none;"}),
        label="Profile description",
    )
    picture = BoundedImageField(required=False)


class SignUpForm(ProfileForm):
    """Registration form: account credentials plus the profile fields."""

    email = forms.CharField(required=False)
    password = forms.CharField(required=False, strip=False, widget=forms.PasswordInput())
    password_confirmation = forms.CharField(required=False, strip=False, widget=forms.PasswordInput())

    def clean(self):
        """Validate the password confirmation matches."""
        cleaned = super().clean()
        p1 = cleaned.get("password")
        p2 = cleaned.get("password_confirmation")
        if p1 != p2:
            self.add_error(
                "password_confirmation",
                "The password and confirmation password do not match.",
            )
        return cleaned
