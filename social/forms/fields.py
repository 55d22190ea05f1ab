from django import forms

MAX_IMAGE_UPLOAD_MB = 10
MAX_IMAGE_UPLOAD_BYTES = MAX_IMAGE_UPLOAD_MB * 1024 * 1024


class IdListField(forms.Field):
    """Form field for a list of integer ids sent as repeated keys or a JSON list."""

    widget = forms.MultipleHiddenInput
    default_error_messages = {
        "invalid": "Enter a list of whole-number ids.",
    }

    def to_python(self, value):
        """Return a de-duplicated list of ints, preserving input order."""
        if value in self.empty_values:
            return []
        if isinstance(value, str):
            value = [part for part in value.split(",") if part.strip()]
        if not isinstance(value, (list, tuple)):
            value = [value]
        # an empty multipart key arrives as [""] and means "no categories"
        value = [item for item in value if str(item).strip()]
        ids = []
        for item in value:
            try:
                item = int(item)
            except (TypeError, ValueError):
                raise forms.ValidationError(self.error_messages["invalid"], code="invalid")
            if item not in ids:
                ids.append(item)
        return ids


class BoundedImageField(forms.ImageField):
    """Image upload field that rejects files over MAX_IMAGE_UPLOAD_MB."""

    def clean(self, data, initial=None):
        image = super().clean(data, initial)
        if image and getattr(image, "size", 0) > MAX_IMAGE_UPLOAD_BYTES:
            raise forms.ValidationError(
                f"Images must be {MAX_IMAGE_UPLOAD_MB}MB or smaller.", code="file_too_large"
            )
        return image
