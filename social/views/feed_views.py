"""Feed endpoints: personalised/guest feed pages and the discovery feed."""

from django.shortcuts import redirect
from rest_framework.decorators import api_view
from rest_framework.response import Response

from social.exceptions import ValidationError
from social.serializers import AuthorSummarySerializer, CategorySerializer, PostCardSerializer
from social.services import FeedService, PostService
from .decorators import profile_completion_required

feed_service = FeedService()
post_service = PostService()


def _viewer_id(request):
    return request.user.id if request.user.is_authenticated else None


def _category_param(request):
    raw = request.query_params.get("category") or request.query_params.get("categoryId")
    if raw in (None, ""):
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValidationError("Category must be an id.", field="category", data={"category": raw})


def _feed_payload(feed_page, request):
    context = {"request": request}
    return {
        "posts": PostCardSerializer(feed_page.posts, many=True, context=context).data,
        "has_more": feed_page.has_more,
        "page": feed_page.page,
        "next_page": feed_page.page + 1 if feed_page.has_more else None,
        "followees": AuthorSummarySerializer(feed_page.followees, many=True).data,
    }


@profile_completion_required
def home(request):
    """Entry point: incomplete profiles are sent to completion, others to the feed."""
    return redirect("feed")


@api_view(["GET"])
def feed(request):
    """First feed page with sidebar data (followees and categories)."""
    feed_page = feed_service.get_feed(
        viewer_id=_viewer_id(request),
        page=request.query_params.get("page", 0),
        category_id=_category_param(request),
    )
    payload = _feed_payload(feed_page, request)
    payload["categories"] = CategorySerializer(post_service.list_categories(), many=True).data
    return Response(payload)


@api_view(["GET"])
def load_feed(request):
    """Incremental "load more" page without sidebar data."""
    feed_page = feed_service.load_more(
        viewer_id=_viewer_id(request),
        page=request.query_params.get("page", 0),
        category_id=_category_param(request),
    )
    return Response(_feed_payload(feed_page, request))


@api_view(["GET"])
def discover(request):
    """Curated feed of popular and recent posts."""
    feed_page = feed_service.discovery_feed(
        category_id=_category_param(request),
        viewer_id=_viewer_id(request),
    )
    return Response(_feed_payload(feed_page, request))


@api_view(["GET"])
def categories(request):
    return Response(CategorySerializer(post_service.list_categories(), many=True).data)
