"""Management command to seed the database with categories, users, follows and posts."""

from datetime import timedelta
from random import choice, randint, sample

from faker import Faker
from django.core.management.base import BaseCommand
from django.db import IntegrityError, transaction
from django.utils import timezone

from social.conf import get_setting
from social.models import Category, Comment, Post, PostCategory, PostLike, User, UserFollow
from .seed_data import CATEGORY_NAMES, comment_phrases, user_fixtures


class Command(BaseCommand):
    """Management command to seed the database with sample data."""
    USER_COUNT = 30
    DEFAULT_PASSWORD = 'Password123'
    help = 'Seeds the database with sample data'

    def add_arguments(self, parser):
        parser.add_argument("--users", type=int, default=self.USER_COUNT, help="Total users to reach.")
        parser.add_argument("--posts-per-user", type=int, default=3)
        parser.add_argument("--follow-k", type=int, default=4, help="Followees per user.")

    def __init__(self, *args, **kwargs):
        """Set up faker instance for generating seed content."""
        super().__init__(*args, **kwargs)
        self.faker = Faker('en_GB')

    def handle(self, *args, **options):
        """Run the full seeding sequence."""
        self.seed_categories()
        self.create_users(options["users"])
        self.seed_follows(follow_k=options["follow_k"])
        self.seed_posts(per_user=options["posts_per_user"])
        self.seed_likes(max_likes_per_post=10)
        self.seed_comments(max_comments_per_post=4)
        self.stdout.write(self.style.SUCCESS("Seeding complete"))

    def seed_categories(self):
        """Create the category reference data; safe to run repeatedly."""
        for name in CATEGORY_NAMES:
            Category.objects.get_or_create(name=name)
        self.stdout.write(f"categories available: {Category.objects.count()}")

    def create_users(self, total):
        for data in user_fixtures:
            self.try_create_user(data)
        while User.objects.count() < total:
            name = self.faker.name()
            self.try_create_user({
                "email": self.faker.unique.email(),
                "display_name": name,
                "bio": self.faker.sentence(nb_words=8),
            })
        self.stdout.write(f"users available: {User.objects.count()}")

    def try_create_user(self, data):
        """Create a user with a complete profile, skipping duplicates."""
        if User.objects.filter(email=data["email"]).exists():
            return None
        try:
            with transaction.atomic():
                return User.objects.create_user(
                    username=data["email"],
                    email=data["email"],
                    password=self.DEFAULT_PASSWORD,
                    display_name=data["display_name"],
                    bio=data.get("bio", ""),
                    profile_picture_url=get_setting("DEFAULT_PROFILE_PICTURE"),
                    is_profile_complete=True,
                )
        except IntegrityError:
            return None

    def seed_follows(self, follow_k: int = 4) -> None:
        """Create follower/followee edges for sample users."""
        ids = list(User.objects.values_list("id", flat=True))
        if len(ids) < 2:
            return
        k = max(0, min(follow_k, len(ids) - 1))
        rows = []
        for follower_id in ids:
            pool = [x for x in ids if x != follower_id]
            for followee_id in sample(pool, k):
                rows.append(UserFollow(follower_id=follower_id, followee_id=followee_id))
        with transaction.atomic():
            UserFollow.objects.bulk_create(rows, ignore_conflicts=True, batch_size=1000)
        self.stdout.write(f"follow edges attempted: {len(rows)}")

    def seed_posts(self, *, per_user: int = 3) -> None:
        """Generate posts spread over the last 60 days, each with 1-2 categories."""
        user_ids = list(User.objects.values_list("id", flat=True))
        category_ids = list(Category.objects.values_list("id", flat=True))
        if not user_ids:
            return
        now = timezone.now()
        created = 0
        with transaction.atomic():
            for user_id in user_ids:
                for _ in range(per_user):
                    post = Post.objects.create(
                        user_id=user_id,
                        title=self.faker.sentence(nb_words=4).rstrip(".")[:200],
                        content=self.faker.paragraph(nb_sentences=3),
                        created_at=now - timedelta(minutes=randint(0, 60 * 24 * 60)),
                    )
                    picks = sample(category_ids, min(len(category_ids), randint(1, 2)))
                    PostCategory.objects.bulk_create(
                        [PostCategory(post=post, category_id=cid) for cid in picks],
                        ignore_conflicts=True,
                    )
                    created += 1
        self.stdout.write(f"posts created: {created}")

    def seed_likes(self, max_likes_per_post: int = 10) -> None:
        """Create random likes for posts up to a max per post."""
        users = list(User.objects.values_list("id", flat=True))
        posts = list(Post.objects.values_list("id", flat=True))
        if not users or not posts:
            return
        rows = []
        for post_id in posts:
            for user_id in sample(users, min(len(users), randint(0, max_likes_per_post))):
                rows.append(PostLike(user_id=user_id, post_id=post_id))
        with transaction.atomic():
            PostLike.objects.bulk_create(rows, ignore_conflicts=True, batch_size=1000)
        self.stdout.write(f"likes created: {len(rows)}")

    def seed_comments(self, max_comments_per_post: int = 4) -> None:
        """Generate random comments for each post."""
        users = list(User.objects.values_list("id", flat=True))
        posts = list(Post.objects.values_list("id", flat=True))
        if not users or not posts:
            return
        rows = []
        for post_id in posts:
            for user_id in sample(users, min(len(users), randint(0, max_comments_per_post))):
                rows.append(Comment(post_id=post_id, user_id=user_id, content=choice(comment_phrases)))
        Comment.objects.bulk_create(rows, batch_size=500)
        self.stdout.write(f"Comments created: {len(rows)}")
