"""Render service-layer errors as JSON responses."""

from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from social.exceptions import FoodMediaError, ValidationError


def exception_handler(exc, context):
    """DRF exception handler that also understands FoodMediaError."""
    if isinstance(exc, FoodMediaError):
        return Response(exc.as_dict(), status=exc.status_code)
    return drf_exception_handler(exc, context)


def form_or_error(form):
    """Return cleaned_data from a valid form, else raise ValidationError."""
    if form.is_valid():
        return form.cleaned_data
    field, messages = next(iter(form.errors.items()))
    data = {
        key: value
        for key, value in form.data.items()
        if not key.startswith("password")
    }
    raise ValidationError(
        " ".join(messages),
        field=None if field == "__all__" else field,
        data=data,
    )
