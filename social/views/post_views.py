"""Post CRUD endpoints. Ownership is enforced by PostService."""

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from social.forms import PostForm, PostMediaForm
from social.serializers import PostDetailSerializer, PostMediaSerializer
from social.services import PostService
from .errors import form_or_error

post_service = PostService()


def _detail_response(post_id, request, status_code=status.HTTP_200_OK):
    post = post_service.get_post(post_id, viewer_id=request.user.id if request.user.is_authenticated else None)
    return Response(PostDetailSerializer(post, context={"request": request}).data, status=status_code)


@api_view(["POST"])
@permission_classes([IsAuthenticated])
def post_create(request):
    """Create a post for the current user from multipart or JSON input."""
    cleaned = form_or_error(PostForm(request.data, request.FILES))
    post = post_service.create_post(
        request.user.id,
        title=cleaned["title"],
        content=cleaned["content"],
        category_ids=cleaned["category_ids"],
        image=cleaned["image"],
    )
    return _detail_response(post.id, request, status.HTTP_201_CREATED)


@api_view(["GET"])
def post_detail(request, post_id):
    return _detail_response(post_id, request)


@api_view(["POST"])
@permission_classes([IsAuthenticated])
def post_edit(request, post_id):
    """Edit an existing post owned by the current user."""
    form = PostForm(request.data, request.FILES)
    cleaned = form_or_error(form)
    post_service.update_post(
        request.user.id,
        post_id,
        title=cleaned["title"],
        content=cleaned["content"],
        image=cleaned["image"],
        category_ids=cleaned["category_ids"] if form.categories_submitted() else None,
    )
    return _detail_response(post_id, request)


@api_view(["POST"])
@permission_classes([IsAuthenticated])
def post_delete(request, post_id):
    """Delete a post owned by the current user."""
    post_service.delete_post(request.user.id, post_id)
    return Response({"success": True})


@api_view(["POST"])
@permission_classes([IsAuthenticated])
def post_add_media(request, post_id):
    cleaned = form_or_error(PostMediaForm(request.data))
    media = post_service.attach_media(
        request.user.id, post_id, url=cleaned["url"], media_type=cleaned["media_type"]
    )
    return Response(PostMediaSerializer(media).data, status=status.HTTP_201_CREATED)
