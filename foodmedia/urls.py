"""
URL configuration for the foodmedia project.

All app endpoints return JSON except `home`, which redirects.
"""
from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import path, include
from social.views import feed_views, interaction_views, post_views, profile_views, social_views

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api-auth/', include('rest_framework.urls')),
    path('', feed_views.home, name='home'),
    path('feed/', feed_views.feed, name='feed'),
    path('feed/more/', feed_views.load_feed, name='load_feed'),
    path('feed/discover/', feed_views.discover, name='discover'),
    path('categories/', feed_views.categories, name='categories'),
    path('sign_up/', profile_views.sign_up, name='sign_up'),
    path('profile/', profile_views.my_profile, name='profile'),
    path('profile/complete/', profile_views.complete_profile, name='complete_profile'),
    path('profile/edit/', profile_views.edit_profile, name='edit_profile'),
    path('users/<int:user_id>/', profile_views.user_profile, name='user_profile'),
    path('users/<int:user_id>/follow/', social_views.follow_user, name='follow_user'),
    path('users/<int:user_id>/unfollow/', social_views.unfollow_user, name='unfollow_user'),
    path('users/<int:user_id>/followees/', social_views.followees, name='followees'),
    path('users/<int:user_id>/followers/', social_views.followers, name='followers'),
    path('posts/', post_views.post_create, name='post_create'),
    path('posts/<int:post_id>/', post_views.post_detail, name='post_detail'),
    path('posts/<int:post_id>/edit/', post_views.post_edit, name='post_edit'),
    path('posts/<int:post_id>/delete/', post_views.post_delete, name='post_delete'),
    path('posts/<int:post_id>/media/', post_views.post_add_media, name='post_add_media'),
    path('posts/<int:post_id>/like/', interaction_views.toggle_like, name='toggle_like'),
    path('posts/<int:post_id>/save/', interaction_views.toggle_save, name='toggle_save'),
    path('posts/<int:post_id>/comments/', interaction_views.post_comments, name='post_comments'),
    path('saved/', interaction_views.saved_posts, name='saved_posts'),
]

urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
