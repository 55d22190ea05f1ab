from rest_framework import serializers

from social.models import Category, Comment, Post, PostMedia, User


class AuthorSummarySerializer(serializers.ModelSerializer):
    """Author fields shown on post cards and comments."""
    display_name = serializers.CharField(source="display_label", read_only=True)
    avatar_url = serializers.CharField(read_only=True)

    class Meta:
        model = User
        fields = ["id", "display_name", "avatar_url"]


class CategorySerializer(serializers.ModelSerializer):
    class Meta:
        model = Category
        fields = ["id", "name"]


class PostCardSerializer(serializers.ModelSerializer):
    """Feed item: post, author summary, tags and the like affordance."""
    author = AuthorSummarySerializer(source="user", read_only=True)
    categories = CategorySerializer(many=True, read_only=True)
    like_count = serializers.IntegerField(source="likes_count", read_only=True)
    liked = serializers.SerializerMethodField()

    class Meta:
        model = Post
        fields = [
            "id",
            "title",
            "content",
            "main_image_url",
            "created_at",
            "author",
            "categories",
            "like_count",
            "liked",
        ]
        read_only_fields = fields

    def get_liked(self, post):
        return bool(getattr(post, "viewer_has_liked", False))


class PostMediaSerializer(serializers.ModelSerializer):
    class Meta:
        model = PostMedia
        fields = ["id", "url", "media_type"]


class PostDetailSerializer(PostCardSerializer):
    media = PostMediaSerializer(many=True, read_only=True)

    class Meta(PostCardSerializer.Meta):
        fields = PostCardSerializer.Meta.fields + ["media"]
        read_only_fields = fields


class CommentSerializer(serializers.ModelSerializer):
    author = AuthorSummarySerializer(source="user", read_only=True)
    post_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Comment
        fields = ["id", "post_id", "author", "content", "created_at"]
        read_only_fields = fields


class UserProfileSerializer(serializers.ModelSerializer):
    display_name = serializers.CharField(source="display_label", read_only=True)
    avatar_url = serializers.CharField(read_only=True)

    class Meta:
        model = User
        fields = [
            "id",
            "display_name",
            "bio",
            "profile_picture_url",
            "avatar_url",
            "is_profile_complete",
        ]
        read_only_fields = fields
