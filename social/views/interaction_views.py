"""Like, save and comment endpoints."""

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated, IsAuthenticatedOrReadOnly
from rest_framework.response import Response

from social.exceptions import ValidationError
from social.serializers import CommentSerializer, PostCardSerializer
from social.services import InteractionService
from social.services.feed import MAX_FEED_PAGE

interaction_service = InteractionService()

COMMENTS_PAGE_SIZE = 50


def _page_number(request):
    """1-based comments page; malformed input is rejected like the feed's page."""
    raw = request.query_params.get("page") or 1
    try:
        page = int(raw)
    except ValueError:
        raise ValidationError("Page must be a whole number.", field="page", data={"page": raw})
    if page < 1:
        raise ValidationError("Page must be 1 or greater.", field="page", data={"page": raw})
    if page > MAX_FEED_PAGE:
        raise ValidationError(
            f"Page cannot be greater than {MAX_FEED_PAGE}.", field="page", data={"page": raw}
        )
    return page


@api_view(["POST"])
@permission_classes([IsAuthenticated])
def toggle_like(request, post_id):
    """Toggle like/unlike and return the authoritative like count."""
    result = interaction_service.toggle_like(request.user.id, post_id)
    return Response({"success": True, "liked": result.liked, "likes": result.like_count})


@api_view(["POST"])
@permission_classes([IsAuthenticated])
def toggle_save(request, post_id):
    result = interaction_service.toggle_save(request.user.id, post_id)
    return Response({"success": True, "saved": result.saved})


@api_view(["GET", "POST"])
@permission_classes([IsAuthenticatedOrReadOnly])
def post_comments(request, post_id):
    """GET lists comments page by page; POST adds one for the current user."""
    if request.method == "POST":
        comment = interaction_service.add_comment(
            request.user.id, post_id, request.data.get("content")
        )
        return Response(
            {"success": True, "comment": CommentSerializer(comment).data},
            status=status.HTTP_201_CREATED,
        )

    page_number = _page_number(request)
    offset = (page_number - 1) * COMMENTS_PAGE_SIZE
    # one extra row tells us whether another page exists
    comments = interaction_service.list_comments(
        post_id, limit=COMMENTS_PAGE_SIZE + 1, offset=offset
    )
    has_more = len(comments) > COMMENTS_PAGE_SIZE
    return Response({
        "comments": CommentSerializer(comments[:COMMENTS_PAGE_SIZE], many=True).data,
        "has_more": has_more,
        "next_page": page_number + 1 if has_more else None,
    })


@api_view(["GET"])
@permission_classes([IsAuthenticated])
def saved_posts(request):
    posts = interaction_service.list_saved_posts(request.user.id)
    return Response(PostCardSerializer(posts, many=True, context={"request": request}).data)
