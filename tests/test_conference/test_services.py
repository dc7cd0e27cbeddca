"""Tests for the dismiss, favorite, and attend services."""

from datetime import date

import pytest

from django_symposium.accounts.models import User
from django_symposium.conference import services
from django_symposium.conference.models import Conference, DismissedConference, Favorite


@pytest.fixture
def user() -> User:
    return User.objects.create_user(email="marker@example.com", password="pw", name="Marker")


@pytest.fixture
def other_user() -> User:
    return User.objects.create_user(email="other@example.com", password="pw", name="Other")


@pytest.fixture
def conference() -> Conference:
    return Conference.objects.create(
        title="MarkerCon",
        slug="markercon",
        starts_at=date(2027, 3, 1),
        ends_at=date(2027, 3, 2),
    )


# ---------------------------------------------------------------------------
# Dismiss / undismiss
# ---------------------------------------------------------------------------


@pytest.mark.django_db
def test_dismiss_creates_one_row(user: User, conference: Conference):
    assert services.dismiss(user, conference) is True
    assert DismissedConference.objects.filter(user=user, conference=conference).count() == 1


@pytest.mark.django_db
def test_dismiss_twice_is_a_no_op(user: User, conference: Conference):
    services.dismiss(user, conference)
    assert services.dismiss(user, conference) is False
    assert DismissedConference.objects.filter(user=user, conference=conference).count() == 1


@pytest.mark.django_db
def test_undismiss_removes_the_row(user: User, conference: Conference):
    services.dismiss(user, conference)
    assert services.undismiss(user, conference) is True
    assert not conference.is_dismissed_by(user)


@pytest.mark.django_db
def test_undismiss_when_not_dismissed_is_a_no_op(user: User, conference: Conference):
    assert services.undismiss(user, conference) is False
    assert DismissedConference.objects.count() == 0


@pytest.mark.django_db
def test_undismiss_leaves_other_users_alone(user: User, other_user: User, conference: Conference):
    services.dismiss(user, conference)
    services.dismiss(other_user, conference)

    services.undismiss(user, conference)

    assert conference.is_dismissed_by(other_user)


# ---------------------------------------------------------------------------
# Favorite / unfavorite
# ---------------------------------------------------------------------------


@pytest.mark.django_db
def test_favorite_and_unfavorite(user: User, conference: Conference):
    assert services.favorite(user, conference) is True
    assert conference.is_favorited_by(user)

    assert services.unfavorite(user, conference) is True
    assert not conference.is_favorited_by(user)


@pytest.mark.django_db
def test_favorite_twice_keeps_one_row(user: User, conference: Conference):
    services.favorite(user, conference)
    assert services.favorite(user, conference) is False
    assert Favorite.objects.filter(user=user, conference=conference).count() == 1


@pytest.mark.django_db
def test_unfavorite_when_not_favorited_is_a_no_op(user: User, conference: Conference):
    assert services.unfavorite(user, conference) is False


@pytest.mark.django_db
def test_favorite_does_not_touch_dismissals(user: User, conference: Conference):
    services.dismiss(user, conference)
    services.favorite(user, conference)
    services.unfavorite(user, conference)

    assert conference.is_dismissed_by(user)


# ---------------------------------------------------------------------------
# Attend / unattend
# ---------------------------------------------------------------------------


@pytest.mark.django_db
def test_attend_and_unattend(user: User, conference: Conference):
    assert services.attend(user, conference) is True
    assert list(user.conferences.all()) == [conference]
    assert services.attend(user, conference) is False

    assert services.unattend(user, conference) is True
    assert user.conferences.count() == 0
    assert services.unattend(user, conference) is False


# ---------------------------------------------------------------------------
# Query helpers
# ---------------------------------------------------------------------------


@pytest.mark.django_db
def test_queryset_helpers_partition_by_user(user: User, other_user: User, conference: Conference):
    hidden = Conference.objects.create(title="Hidden", slug="hidden")
    services.dismiss(user, hidden)
    services.favorite(user, conference)

    assert list(Conference.objects.dismissed_by(user)) == [hidden]
    assert list(Conference.objects.undismissed_by(user)) == [conference]
    assert list(Conference.objects.favorited_by(user)) == [conference]
    assert set(Conference.objects.undismissed_by(other_user)) == {conference, hidden}


@pytest.mark.django_db
def test_approved_excludes_unapproved(conference: Conference):
    Conference.objects.create(title="Pending", slug="pending", is_approved=False)
    assert list(Conference.objects.approved()) == [conference]
