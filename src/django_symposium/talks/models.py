"""Talk, revision, bio, submission, and acceptance models for django-symposium."""

from django.conf import settings
from django.db import models
from django.urls import reverse


class Talk(models.Model):
    """A proposed presentation owned by one author.

    A talk carries no content of its own; its title, description, and so on
    live on immutable :class:`TalkRevision` rows. The newest revision is the
    current one.
    """

    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="talks",
    )
    public = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "talks"
        ordering = ["-created_at"]

    def __str__(self) -> str:
        # Reads through .all() so prefetch_related("revisions") is reused.
        revisions = list(self.revisions.all())
        if not revisions:
            return f"Talk #{self.pk}"
        return max(revisions, key=lambda revision: (revision.created_at, revision.pk)).title

    def get_absolute_url(self) -> str:
        return reverse("talks:detail", args=[self.pk])

    def current(self) -> "TalkRevision":
        """Return the most recent revision.

        Raises:
            TalkRevision.DoesNotExist: If the talk has no revisions.
        """
        return self.revisions.latest()

    def get_my_submission_for_conference(self, conference: object) -> "Submission | None":
        """Return the author's submission of this talk to *conference*, if any."""
        return (
            Submission.objects.filter(talk=self, talk__author_id=self.author_id, conference=conference)
            .select_related("acceptance")
            .first()
        )


class TalkRevision(models.Model):
    """An immutable snapshot of a talk's content.

    Editing a talk creates a new revision rather than updating one in place.
    """

    class TalkType(models.TextChoices):
        """Format of the talk."""

        KEYNOTE = "keynote", "Keynote"
        REGULAR = "regular", "Regular"
        LIGHTNING = "lightning", "Lightning"
        SEMINAR = "seminar", "Seminar"
        WORKSHOP = "workshop", "Workshop"
        PANEL = "panel", "Panel"
        OTHER = "other", "Other"

    class Level(models.TextChoices):
        """Audience level of the talk."""

        BEGINNER = "beginner", "Beginner"
        INTERMEDIATE = "intermediate", "Intermediate"
        ADVANCED = "advanced", "Advanced"

    talk = models.ForeignKey(
        Talk,
        on_delete=models.CASCADE,
        related_name="revisions",
    )
    title = models.CharField(max_length=255)
    type = models.CharField(max_length=20, choices=TalkType.choices, default=TalkType.REGULAR)
    level = models.CharField(max_length=20, choices=Level.choices, default=Level.BEGINNER)
    length = models.PositiveIntegerField(default=30, help_text="Length in minutes.")
    description = models.TextField(blank=True, default="")
    slides = models.URLField(blank=True, default="")
    organizer_notes = models.TextField(blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "talk_revisions"
        ordering = ["-created_at", "-pk"]
        get_latest_by = ["created_at", "pk"]

    def __str__(self) -> str:
        return str(self.title)

    def get_url(self) -> str:
        """Return the URL of the talk this revision belongs to."""
        return self.talk.get_absolute_url()


class Bio(models.Model):
    """A speaker biography; a user may keep several for different audiences."""

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="bios",
    )
    nickname = models.CharField(max_length=255)
    body = models.TextField()
    public = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "bios"
        ordering = ["nickname"]

    def __str__(self) -> str:
        return str(self.nickname)


class Submission(models.Model):
    """A talk proposed to a specific conference."""

    talk = models.ForeignKey(
        Talk,
        on_delete=models.CASCADE,
        related_name="submissions",
    )
    conference = models.ForeignKey(
        "symposium_conference.Conference",
        on_delete=models.CASCADE,
        related_name="submissions",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "submissions"
        ordering = ["-created_at"]
        constraints = [
            models.UniqueConstraint(fields=["talk", "conference"], name="unique_submission_per_conference"),
        ]

    def __str__(self) -> str:
        return f"{self.talk} @ {self.conference}"

    @property
    def is_accepted(self) -> bool:
        """Whether an acceptance exists for this submission."""
        return hasattr(self, "acceptance")


class Acceptance(models.Model):
    """Approval record for a submission; at most one per submission."""

    submission = models.OneToOneField(
        Submission,
        on_delete=models.CASCADE,
        related_name="acceptance",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "acceptances"

    def __str__(self) -> str:
        return f"Accepted: {self.submission}"
