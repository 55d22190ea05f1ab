import django.contrib.auth.models
import django.contrib.auth.validators
import django.core.validators
import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("auth", "0012_alter_user_first_name_max_length"),
    ]

    operations = [
        migrations.CreateModel(
            name="User",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("password", models.CharField(max_length=128, verbose_name="password")),
                ("last_login", models.DateTimeField(blank=True, null=True, verbose_name="last login")),
                ("is_superuser", models.BooleanField(default=False, help_text="Designates that this user has all permissions without explicitly assigning them.", verbose_name="superuser status")),
                ("username", models.CharField(error_messages={"unique": "A user with that username already exists."}, help_text="Required. 150 characters or fewer. Letters, digits and @/./+/-/_ only.", max_length=150, unique=True, validators=[django.contrib.auth.validators.UnicodeUsernameValidator()], verbose_name="username")),
                ("first_name", models.CharField(blank=True, max_length=150, verbose_name="first name")),
                ("last_name", models.CharField(blank=True, max_length=150, verbose_name="last name")),
                ("is_staff", models.BooleanField(default=False, help_text="Designates whether the user can log into this admin site.", verbose_name="staff status")),
                ("is_active", models.BooleanField(default=True, help_text="Designates whether this user should be treated as active. Unselect this instead of deleting accounts.", verbose_name="active")),
                ("date_joined", models.DateTimeField(default=django.utils.timezone.now, verbose_name="date joined")),
                ("email", models.EmailField(max_length=254, unique=True)),
                ("display_name", models.CharField(blank=True, max_length=100)),
                ("bio", models.TextField(blank=True, default="", help_text="short user bio shown on profile", max_length=500, validators=[django.core.validators.MaxLengthValidator(500)])),
                ("profile_picture_url", models.CharField(blank=True, default="", max_length=500)),
                ("is_profile_complete", models.BooleanField(default=False)),
                ("groups", models.ManyToManyField(blank=True, help_text="The groups this user belongs to. A user will get all permissions granted to each of their groups.", related_name="user_set", related_query_name="user", to="auth.group", verbose_name="groups")),
                ("user_permissions", models.ManyToManyField(blank=True, help_text="Specific permissions for this user.", related_name="user_set", related_query_name="user", to="auth.permission", verbose_name="user permissions")),
            ],
            options={
                "verbose_name": "user",
                "verbose_name_plural": "users",
                "ordering": ["display_name", "username"],
                "abstract": False,
            },
            managers=[
                ("objects", django.contrib.auth.models.UserManager()),
            ],
        ),
        migrations.CreateModel(
            name="Category",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=50, unique=True)),
            ],
            options={
                "db_table": "category",
                "ordering": ["name"],
                "verbose_name_plural": "categories",
            },
        ),
        migrations.CreateModel(
            name="Post",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=200)),
                ("content", models.TextField(blank=True, default="")),
                ("main_image_url", models.CharField(blank=True, default="", max_length=500)),
                ("created_at", models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ("user", models.ForeignKey(db_column="user_id", on_delete=django.db.models.deletion.PROTECT, related_name="posts", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "post",
                "ordering": ["-created_at", "-id"],
            },
        ),
        migrations.CreateModel(
            name="PostCategory",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("category", models.ForeignKey(db_column="category_id", on_delete=django.db.models.deletion.PROTECT, related_name="post_categories", to="social.category")),
                ("post", models.ForeignKey(db_column="post_id", on_delete=django.db.models.deletion.CASCADE, related_name="post_categories", to="social.post")),
            ],
            options={
                "db_table": "post_category",
            },
        ),
        migrations.AddField(
            model_name="post",
            name="categories",
            field=models.ManyToManyField(blank=True, related_name="posts", through="social.PostCategory", to="social.category"),
        ),
        migrations.AddConstraint(
            model_name="postcategory",
            constraint=models.UniqueConstraint(fields=("post", "category"), name="uniq_post_category"),
        ),
        migrations.CreateModel(
            name="PostMedia",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("url", models.CharField(max_length=500)),
                ("media_type", models.CharField(choices=[("image", "Image"), ("video", "Video")], default="image", max_length=10)),
                ("post", models.ForeignKey(db_column="post_id", on_delete=django.db.models.deletion.PROTECT, related_name="media", to="social.post")),
            ],
            options={
                "db_table": "post_media",
                "ordering": ["id"],
            },
        ),
        migrations.CreateModel(
            name="Comment",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("content", models.TextField(max_length=2000)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("post", models.ForeignKey(db_column="post_id", on_delete=django.db.models.deletion.PROTECT, related_name="comments", to="social.post")),
                ("user", models.ForeignKey(db_column="user_id", on_delete=django.db.models.deletion.PROTECT, related_name="comments", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "comment",
                "ordering": ["-created_at", "-id"],
            },
        ),
        migrations.CreateModel(
            name="PostLike",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("liked_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("post", models.ForeignKey(db_column="post_id", on_delete=django.db.models.deletion.PROTECT, related_name="likes", to="social.post")),
                ("user", models.ForeignKey(db_column="user_id", on_delete=django.db.models.deletion.PROTECT, related_name="likes", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "post_like",
                "constraints": [models.UniqueConstraint(fields=("user", "post"), name="uniq_post_like_user_post")],
            },
        ),
        migrations.CreateModel(
            name="SavedPost",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("saved_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("post", models.ForeignKey(db_column="post_id", on_delete=django.db.models.deletion.PROTECT, related_name="saved_by", to="social.post")),
                ("user", models.ForeignKey(db_column="user_id", on_delete=django.db.models.deletion.PROTECT, related_name="saved_posts", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "saved_post",
                "indexes": [models.Index(fields=["user"], name="saved_post_user_id_idx")],
                "constraints": [models.UniqueConstraint(fields=("user", "post"), name="uniq_saved_post_user_post")],
            },
        ),
        migrations.CreateModel(
            name="UserFollow",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("followee", models.ForeignKey(db_column="followee_id", on_delete=django.db.models.deletion.PROTECT, related_name="followers", to=settings.AUTH_USER_MODEL)),
                ("follower", models.ForeignKey(db_column="follower_id", on_delete=django.db.models.deletion.PROTECT, related_name="following", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "user_follow",
                "indexes": [
                    models.Index(fields=["follower"], name="user_follow_follower_idx"),
                    models.Index(fields=["followee"], name="user_follow_followee_idx"),
                ],
                "constraints": [
                    models.UniqueConstraint(fields=("follower", "followee"), name="uniq_user_follow_pair"),
                    models.CheckConstraint(condition=~models.Q(("follower", models.F("followee"))), name="chk_user_follow_not_self"),
                ],
            },
        ),
    ]
