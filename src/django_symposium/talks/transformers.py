"""Flatten a talk and a conference into a view-friendly record."""

from typing import TypedDict

from django.contrib.auth.base_user import AbstractBaseUser

from django_symposium.conference.models import Conference
from django_symposium.talks.models import Acceptance, Talk


class TalkForConference(TypedDict):
    """Submission state of one talk within one conference."""

    id: int
    title: str
    url: str
    submitted: bool
    submissionId: int | None  # noqa: N815
    accepted: bool
    acceptanceId: int | None  # noqa: N815


def talk_for_conference(talk: Talk, conference: Conference) -> TalkForConference:
    """Project *talk*'s submission and acceptance state for *conference*.

    Read-only: nothing is written.

    Args:
        talk: The talk to describe. Must have at least one revision.
        conference: The conference the state is computed against.

    Returns:
        A dict with the current title and URL of the talk plus the
        ``submitted``/``submissionId`` and ``accepted``/``acceptanceId`` pairs.

    Raises:
        TalkRevision.DoesNotExist: If the talk has no revisions.
    """
    current = talk.current()

    submission = talk.get_my_submission_for_conference(conference)
    acceptance = None
    if submission is not None:
        try:
            acceptance = submission.acceptance
        except Acceptance.DoesNotExist:
            acceptance = None

    return {
        "id": talk.pk,
        "title": current.title,
        "url": current.get_url(),
        "submitted": submission is not None,
        "submissionId": submission.pk if submission is not None else None,
        "accepted": acceptance is not None,
        "acceptanceId": acceptance.pk if acceptance is not None else None,
    }


def talks_for_conference(user: AbstractBaseUser, conference: Conference) -> list[TalkForConference]:
    """Project every talk authored by *user* for *conference*.

    Talks without any revision are skipped.
    """
    talks = Talk.objects.filter(author=user, revisions__isnull=False).distinct().order_by("-created_at")
    return [talk_for_conference(talk, conference) for talk in talks]
