from django.core.management.base import BaseCommand
from django.db import transaction

from social.models import Comment, Post, PostCategory, PostLike, PostMedia, SavedPost, User, UserFollow


class Command(BaseCommand):
    """
    Management command to remove (unseed) user data from the database.

    Deletes every non-staff user together with their posts and interactions.
    All foreign keys restrict deletes, so dependent rows go first. Category
    reference data and staff accounts are kept.
    """

    help = 'Removes seeded sample data'

    def handle(self, *args, **options):
        non_staff = User.objects.filter(is_staff=False)
        posts = Post.objects.filter(user__in=non_staff)

        with transaction.atomic():
            PostLike.objects.filter(post__in=posts).delete()
            PostLike.objects.filter(user__in=non_staff).delete()
            SavedPost.objects.filter(post__in=posts).delete()
            SavedPost.objects.filter(user__in=non_staff).delete()
            Comment.objects.filter(post__in=posts).delete()
            Comment.objects.filter(user__in=non_staff).delete()
            PostMedia.objects.filter(post__in=posts).delete()
            PostCategory.objects.filter(post__in=posts).delete()
            UserFollow.objects.filter(follower__in=non_staff).delete()
            UserFollow.objects.filter(followee__in=non_staff).delete()
            posts.delete()
            count, _ = non_staff.delete()

        self.stdout.write(self.style.SUCCESS(f"Removed seeded data ({count} rows in final delete)"))
