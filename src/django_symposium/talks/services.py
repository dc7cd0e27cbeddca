"""Talk lifecycle helpers.

Talks are versioned: creating or editing a talk always writes a new
:class:`TalkRevision`. Submissions tie a talk to a conference.
"""

import logging
from collections.abc import Mapping

from django.contrib.auth.base_user import AbstractBaseUser
from django.db import transaction

from django_symposium.conference.models import Conference
from django_symposium.talks.models import Submission, Talk, TalkRevision

logger = logging.getLogger(__name__)

REVISION_FIELDS = ("title", "type", "level", "length", "description", "slides", "organizer_notes")


def _revision_kwargs(data: Mapping[str, object]) -> dict[str, object]:
    return {name: data[name] for name in REVISION_FIELDS if name in data}


@transaction.atomic
def create_talk(author: AbstractBaseUser, data: Mapping[str, object], *, public: bool = False) -> Talk:
    """Create a talk and its first revision.

    Args:
        author: The owning user.
        data: Revision field values; ``title`` is required.
        public: Whether the talk shows on the author's public profile.

    Returns:
        The new talk.
    """
    talk = Talk.objects.create(author=author, public=public)
    TalkRevision.objects.create(talk=talk, **_revision_kwargs(data))
    logger.info("Talk %s created by user %s", talk.pk, author.pk)
    return talk


@transaction.atomic
def revise_talk(talk: Talk, data: Mapping[str, object], *, public: bool | None = None) -> TalkRevision:
    """Record a new revision for *talk*.

    Earlier revisions are left untouched.
    """
    revision = TalkRevision.objects.create(talk=talk, **_revision_kwargs(data))
    if public is not None:
        talk.public = public
    talk.save(update_fields=["public", "updated_at"])
    logger.info("Talk %s revised (revision %s)", talk.pk, revision.pk)
    return revision


def submit_talk(talk: Talk, conference: Conference) -> tuple[Submission, bool]:
    """Submit *talk* to *conference*.

    Submitting the same talk twice returns the existing submission.

    Returns:
        The submission and whether it was newly created.
    """
    submission, created = Submission.objects.get_or_create(talk=talk, conference=conference)
    if created:
        logger.info("Talk %s submitted to conference %s", talk.pk, conference.pk)
    return submission, created


def withdraw_submission(submission: Submission) -> None:
    """Delete *submission* together with its acceptance, if any."""
    logger.info("Submission %s withdrawn from conference %s", submission.pk, submission.conference_id)
    submission.delete()
