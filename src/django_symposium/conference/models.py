"""Conference models for django-symposium.

Attendance, dismissal, and favoriting are three independent ``(user,
conference)`` association sets. Each lives in its own table so they can be
queried and deleted without touching one another.
"""

from django.conf import settings
from django.db import models
from django.urls import reverse


class ConferenceQuerySet(models.QuerySet):
    """Query helpers for the conference listing."""

    def approved(self) -> "ConferenceQuerySet":
        """Return conferences visible to speakers."""
        return self.filter(is_approved=True)

    def dismissed_by(self, user: object) -> "ConferenceQuerySet":
        """Return conferences *user* has dismissed."""
        return self.filter(dismissals__user=user)

    def favorited_by(self, user: object) -> "ConferenceQuerySet":
        """Return conferences *user* has favorited."""
        return self.filter(favorites__user=user)

    def undismissed_by(self, user: object) -> "ConferenceQuerySet":
        """Return conferences *user* has not dismissed."""
        return self.exclude(dismissals__user=user)


class Conference(models.Model):
    """A conference with a call for proposals.

    The central model that talks are submitted to. Conferences are shared by
    every user, so deleting an account never deletes a conference.
    """

    title = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, unique=True)
    description = models.TextField(blank=True, default="")
    url = models.URLField(blank=True, default="")
    cfp_url = models.URLField(blank=True, default="")

    starts_at = models.DateField(null=True, blank=True)
    ends_at = models.DateField(null=True, blank=True)
    cfp_starts_at = models.DateField(null=True, blank=True)
    cfp_ends_at = models.DateField(null=True, blank=True)

    is_approved = models.BooleanField(default=True)

    attendees = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        related_name="conferences",
        blank=True,
        db_table="conference_attendees",
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = ConferenceQuerySet.as_manager()

    class Meta:
        db_table = "conferences"
        ordering = ["starts_at", "title"]

    def __str__(self) -> str:
        return self.title

    def get_absolute_url(self) -> str:
        return reverse("conference:detail", args=[self.pk])

    def is_dismissed_by(self, user: object) -> bool:
        """Whether *user* has dismissed this conference."""
        return self.dismissals.filter(user=user).exists()

    def is_favorited_by(self, user: object) -> bool:
        """Whether *user* has favorited this conference."""
        return self.favorites.filter(user=user).exists()


class DismissedConference(models.Model):
    """Marks a conference as hidden from a user's listing."""

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="dismissed_conference_rows",
    )
    conference = models.ForeignKey(
        Conference,
        on_delete=models.CASCADE,
        related_name="dismissals",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "dismissed_conferences"
        constraints = [
            models.UniqueConstraint(fields=["user", "conference"], name="unique_dismissed_conference"),
        ]

    def __str__(self) -> str:
        return f"{self.user} dismissed {self.conference}"


class Favorite(models.Model):
    """Marks a conference as one of a user's favorites."""

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="favorite_rows",
    )
    conference = models.ForeignKey(
        Conference,
        on_delete=models.CASCADE,
        related_name="favorites",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "favorites"
        constraints = [
            models.UniqueConstraint(fields=["user", "conference"], name="unique_favorite_conference"),
        ]

    def __str__(self) -> str:
        return f"{self.user} favorited {self.conference}"
