"""Registration and profile endpoints."""

from django.contrib.auth import login
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response

from social.forms import ProfileForm, SignUpForm
from social.serializers import PostCardSerializer, UserProfileSerializer
from social.services import ProfileService
from .errors import form_or_error

profile_service = ProfileService()


def _profile_payload(profile_view, request):
    return {
        "user": UserProfileSerializer(profile_view.user).data,
        "posts": PostCardSerializer(profile_view.posts, many=True, context={"request": request}).data,
    }


@api_view(["POST"])
@permission_classes([AllowAny])
def sign_up(request):
    """Register an account with a complete profile and sign it in."""
    cleaned = form_or_error(SignUpForm(request.data, request.FILES))
    user = profile_service.register(
        email=cleaned["email"],
        password=cleaned["password"],
        display_name=cleaned["display_name"],
        bio=cleaned["bio"],
        picture=cleaned["picture"],
    )
    login(request, user, backend="django.contrib.auth.backends.ModelBackend")
    return Response(UserProfileSerializer(user).data, status=status.HTTP_201_CREATED)


@api_view(["GET", "POST"])
@permission_classes([IsAuthenticated])
def complete_profile(request):
    """GET returns the current values; POST completes the profile."""
    if request.method == "GET":
        return Response(UserProfileSerializer(request.user).data)
    cleaned = form_or_error(ProfileForm(request.data, request.FILES))
    user = profile_service.complete_profile(
        request.user.id,
        display_name=cleaned["display_name"],
        bio=cleaned["bio"],
        picture=cleaned["picture"],
    )
    return Response(UserProfileSerializer(user).data)


@api_view(["POST"])
@permission_classes([IsAuthenticated])
def edit_profile(request):
    cleaned = form_or_error(ProfileForm(request.data, request.FILES))
    user = profile_service.edit_profile(
        request.user.id,
        display_name=cleaned["display_name"],
        bio=cleaned["bio"],
        picture=cleaned["picture"],
    )
    return Response(UserProfileSerializer(user).data)


@api_view(["GET"])
@permission_classes([IsAuthenticated])
def my_profile(request):
    """The current user's profile and posts."""
    profile_view = profile_service.get_profile(request.user.id, viewer_id=request.user.id)
    return Response(_profile_payload(profile_view, request))


@api_view(["GET"])
def user_profile(request, user_id):
    """Another user's public profile and posts."""
    viewer_id = request.user.id if request.user.is_authenticated else None
    profile_view = profile_service.get_profile(user_id, viewer_id=viewer_id)
    return Response(_profile_payload(profile_view, request))
