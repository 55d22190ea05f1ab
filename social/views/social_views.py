from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from social.serializers import AuthorSummarySerializer
from social.services import FollowService, SocialGraphService

follow_service = FollowService()
social_graph = SocialGraphService()


@api_view(["POST"])
@permission_classes([IsAuthenticated])
def follow_user(request, user_id):
    """Follow another user; self-follows and double follows are rejected."""
    follow_service.follow(request.user.id, user_id)
    return Response({"status": "following", "followee_id": user_id}, status=status.HTTP_201_CREATED)


@api_view(["POST"])
@permission_classes([IsAuthenticated])
def unfollow_user(request, user_id):
    removed = follow_service.unfollow(request.user.id, user_id)
    return Response({"status": "unfollowed" if removed else "not_following", "followee_id": user_id})


@api_view(["GET"])
def followees(request, user_id):
    users = social_graph.list_followees(user_id)
    return Response(AuthorSummarySerializer(users, many=True).data)


@api_view(["GET"])
def followers(request, user_id):
    users = social_graph.list_followers(user_id)
    return Response(AuthorSummarySerializer(users, many=True).data)
