from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin

from social.models import Category, Comment, Post, PostCategory, PostLike, PostMedia, SavedPost, User, UserFollow


class PostCategoryInline(admin.TabularInline):
    """Edit a post's category tags on the post page."""
    model = PostCategory
    extra = 0


class PostMediaInline(admin.TabularInline):
    model = PostMedia
    extra = 0


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """User admin with the profile fields added."""
    list_display = ('username', 'email', 'display_name', 'is_profile_complete', 'is_staff')
    list_filter = BaseUserAdmin.list_filter + ('is_profile_complete',)
    search_fields = ('username', 'email', 'display_name')
    fieldsets = BaseUserAdmin.fieldsets + (
        ('Profile', {'fields': ('display_name', 'bio', 'profile_picture_url', 'is_profile_complete')}),
    )


@admin.register(Post)
class PostAdmin(admin.ModelAdmin):
    list_display = ('title', 'user', 'created_at', 'like_count_display')
    list_filter = ('created_at', 'categories')
    search_fields = ('title', 'content', 'user__username', 'user__display_name')
    inlines = [PostCategoryInline, PostMediaInline]

    def like_count_display(self, obj):
        """Number of likes on the post."""
        return obj.likes.count()
    like_count_display.short_description = "Likes"

    def delete_model(self, request, obj):
        """Route deletes through PostService so dependent rows are removed first."""
        from social.services import PostService
        PostService().delete_post(obj.user_id, obj.id)

    def delete_queryset(self, request, queryset):
        from social.services import PostService
        service = PostService()
        for post in queryset:
            service.delete_post(post.user_id, post.id)


@admin.register(Comment)
class CommentAdmin(admin.ModelAdmin):
    list_display = ('short_text', 'user', 'post', 'created_at')
    list_filter = ('created_at',)
    search_fields = ('content', 'user__username')

    def short_text(self, obj):
        """Shorten comment text for list display."""
        return obj.content[:50] + "..." if len(obj.content) > 50 else obj.content


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ('name',)
    search_fields = ('name',)


@admin.register(UserFollow)
class UserFollowAdmin(admin.ModelAdmin):
    list_display = ('follower', 'followee', 'created_at')


@admin.register(PostLike)
class PostLikeAdmin(admin.ModelAdmin):
    list_display = ('user', 'post', 'liked_at')


@admin.register(SavedPost)
class SavedPostAdmin(admin.ModelAdmin):
    list_display = ('user', 'post', 'saved_at')
