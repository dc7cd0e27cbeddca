"""Tests for the account deletion service."""

import logging
from datetime import date
from unittest.mock import patch

import pytest
from django.db import DatabaseError

from django_symposium.accounts.models import User
from django_symposium.accounts.services import AccountDeletionError, delete_account
from django_symposium.conference.models import Conference, DismissedConference, Favorite
from django_symposium.talks.models import Acceptance, Bio, Submission, Talk, TalkRevision


@pytest.fixture
def speaker() -> User:
    return User.objects.create_user(email="speaker@example.com", password="pw", name="Speaker")


@pytest.fixture
def bystander() -> User:
    return User.objects.create_user(email="bystander@example.com", password="pw", name="Bystander")


@pytest.fixture
def conference() -> Conference:
    return Conference.objects.create(
        title="DeleteCon",
        slug="deletecon",
        starts_at=date(2027, 9, 1),
        ends_at=date(2027, 9, 2),
    )


def _talk_with_revisions(author: User, *titles: str) -> Talk:
    talk = Talk.objects.create(author=author)
    for title in titles:
        TalkRevision.objects.create(talk=talk, title=title)
    return talk


@pytest.mark.django_db
def test_delete_account_reports_counts_per_table(speaker: User, conference: Conference):
    talk = _talk_with_revisions(speaker, "Draft", "Final")
    Bio.objects.create(user=speaker, nickname="Short", body="Short bio")
    Bio.objects.create(user=speaker, nickname="Long", body="Long bio")
    submission = Submission.objects.create(talk=talk, conference=conference)
    Acceptance.objects.create(submission=submission)
    DismissedConference.objects.create(user=speaker, conference=conference)
    Favorite.objects.create(user=speaker, conference=conference)
    conference.attendees.add(speaker)

    counts = delete_account(speaker)

    assert counts == {
        "acceptances": 1,
        "submissions": 1,
        "talk_revisions": 2,
        "talks": 1,
        "bios": 2,
        "dismissed_conferences": 1,
        "favorites": 1,
        "conference_attendees": 1,
        "users": 1,
    }
    assert not User.objects.filter(pk=speaker.pk).exists()


@pytest.mark.django_db
def test_delete_account_with_nothing_owned(speaker: User):
    counts = delete_account(speaker)

    assert counts["users"] == 1
    assert all(count == 0 for table, count in counts.items() if table != "users")


@pytest.mark.django_db
def test_delete_account_leaves_other_users_untouched(speaker: User, bystander: User, conference: Conference):
    _talk_with_revisions(speaker, "Mine")
    their_talk = _talk_with_revisions(bystander, "Theirs")
    their_bio = Bio.objects.create(user=bystander, nickname="Theirs", body="Body")
    their_submission = Submission.objects.create(talk=their_talk, conference=conference)
    Acceptance.objects.create(submission=their_submission)
    DismissedConference.objects.create(user=speaker, conference=conference)
    DismissedConference.objects.create(user=bystander, conference=conference)
    Favorite.objects.create(user=speaker, conference=conference)
    Favorite.objects.create(user=bystander, conference=conference)
    conference.attendees.add(speaker, bystander)

    delete_account(speaker)

    assert Conference.objects.filter(pk=conference.pk).exists()
    assert Talk.objects.filter(pk=their_talk.pk).exists()
    assert TalkRevision.objects.filter(talk=their_talk).count() == 1
    assert Bio.objects.filter(pk=their_bio.pk).exists()
    assert Submission.objects.filter(pk=their_submission.pk).exists()
    assert Acceptance.objects.filter(submission=their_submission).exists()
    assert DismissedConference.objects.filter(user=bystander).count() == 1
    assert Favorite.objects.filter(user=bystander).count() == 1
    assert list(conference.attendees.all()) == [bystander]


@pytest.mark.django_db
def test_delete_account_failure_rolls_back_and_raises(speaker: User, conference: Conference):
    talk = _talk_with_revisions(speaker, "Keep me")
    Bio.objects.create(user=speaker, nickname="Bio", body="Body")
    submission = Submission.objects.create(talk=talk, conference=conference)
    Acceptance.objects.create(submission=submission)
    Favorite.objects.create(user=speaker, conference=conference)
    conference.attendees.add(speaker)

    with (
        patch.object(User, "delete", side_effect=DatabaseError("constraint failed")),
        pytest.raises(AccountDeletionError) as excinfo,
    ):
        delete_account(speaker)

    assert isinstance(excinfo.value.__cause__, DatabaseError)
    assert User.objects.filter(pk=speaker.pk).exists()
    assert Talk.objects.filter(pk=talk.pk).exists()
    assert TalkRevision.objects.filter(talk=talk).count() == 1
    assert Bio.objects.filter(user=speaker).count() == 1
    assert Submission.objects.filter(pk=submission.pk).exists()
    assert Acceptance.objects.filter(submission=submission).exists()
    assert Favorite.objects.filter(user=speaker).count() == 1
    assert conference.attendees.filter(pk=speaker.pk).exists()


@pytest.mark.django_db
def test_delete_account_logs_summary(speaker: User, caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.INFO, logger="django_symposium.accounts.services"):
        delete_account(speaker)

    assert any("Deleted account" in record.getMessage() for record in caplog.records)


@pytest.mark.django_db
def test_delete_account_logs_failure(speaker: User, caplog: pytest.LogCaptureFixture):
    with (
        caplog.at_level(logging.ERROR, logger="django_symposium.accounts.services"),
        patch.object(User, "delete", side_effect=DatabaseError("boom")),
        pytest.raises(AccountDeletionError),
    ):
        delete_account(speaker)

    assert any("rolled back" in record.getMessage() for record in caplog.records)
