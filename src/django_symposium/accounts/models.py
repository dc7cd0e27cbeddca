"""User model for django-symposium.

Speakers sign in with their email address. Profile fields drive the public
speaker page served at ``/u/<profile_slug>/``.
"""

from django.contrib.auth.base_user import AbstractBaseUser, BaseUserManager
from django.contrib.auth.models import PermissionsMixin
from django.db import models
from django.utils import timezone


class UserManager(BaseUserManager):
    """Manager that creates users keyed on email instead of username."""

    use_in_migrations = True

    def _create_user(self, email: str, password: str | None, **extra_fields: object) -> "User":
        if not email:
            msg = "Users must have an email address"
            raise ValueError(msg)
        user = self.model(email=self.normalize_email(email), **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_user(self, email: str, password: str | None = None, **extra_fields: object) -> "User":
        """Create a regular speaker account."""
        extra_fields.setdefault("is_staff", False)
        extra_fields.setdefault("is_superuser", False)
        return self._create_user(email, password, **extra_fields)

    def create_superuser(self, email: str, password: str | None = None, **extra_fields: object) -> "User":
        """Create an account with full admin access."""
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        if extra_fields["is_staff"] is not True:
            msg = "Superuser must have is_staff=True."
            raise ValueError(msg)
        if extra_fields["is_superuser"] is not True:
            msg = "Superuser must have is_superuser=True."
            raise ValueError(msg)
        return self._create_user(email, password, **extra_fields)


def _profile_picture_path(instance: "User", filename: str) -> str:
    return f"profile_pictures/{instance.pk or 'new'}/{filename}"


class User(AbstractBaseUser, PermissionsMixin):
    """A speaker account.

    Owns talks and bios, attends conferences, and keeps independent sets of
    dismissed and favorited conferences (see the conference app).
    """

    email = models.EmailField(unique=True)
    name = models.CharField(max_length=255)

    profile_slug = models.SlugField(max_length=255, unique=True, null=True, blank=True, default=None)
    profile_intro = models.TextField(blank=True, default="")
    profile_picture = models.FileField(
        upload_to=_profile_picture_path,
        blank=True,
        default="",
    )
    enable_profile = models.BooleanField(default=False)
    allow_profile_contact = models.BooleanField(default=False)
    wants_notifications = models.BooleanField(default=False)

    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)

    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    objects = UserManager()

    EMAIL_FIELD = "email"
    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = ["name"]

    class Meta:
        db_table = "users"
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name or self.email

    def get_full_name(self) -> str:
        """Return the display name."""
        return self.name

    def get_short_name(self) -> str:
        """Return the display name."""
        return self.name

    @property
    def has_public_profile(self) -> bool:
        """Whether ``/u/<profile_slug>/`` should render for this user."""
        return self.enable_profile and bool(self.profile_slug)
