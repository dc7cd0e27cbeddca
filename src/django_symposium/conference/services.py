"""Per-user conference markers.

Dismissing, favoriting, and attending are plain join-row inserts and deletes.
Every operation is idempotent on intent and returns ``True`` only when the
underlying table actually changed. The acting user is always passed in by the
caller; nothing here reads the request.
"""

import logging

from django.contrib.auth.base_user import AbstractBaseUser

from django_symposium.conference.models import Conference, DismissedConference, Favorite

logger = logging.getLogger(__name__)


def dismiss(user: AbstractBaseUser, conference: Conference) -> bool:
    """Hide *conference* from *user*'s listing.

    Returns:
        ``True`` if a row was created, ``False`` if it was already dismissed.
    """
    _, created = DismissedConference.objects.get_or_create(user=user, conference=conference)
    if created:
        logger.info("User %s dismissed conference %s", user.pk, conference.pk)
    return created


def undismiss(user: AbstractBaseUser, conference: Conference) -> bool:
    """Show *conference* in *user*'s listing again.

    Returns:
        ``True`` if a row was removed, ``False`` if it was not dismissed.
    """
    deleted, _ = DismissedConference.objects.filter(user=user, conference=conference).delete()
    if deleted:
        logger.info("User %s undismissed conference %s", user.pk, conference.pk)
    return bool(deleted)


def favorite(user: AbstractBaseUser, conference: Conference) -> bool:
    """Add *conference* to *user*'s favorites."""
    _, created = Favorite.objects.get_or_create(user=user, conference=conference)
    if created:
        logger.info("User %s favorited conference %s", user.pk, conference.pk)
    return created


def unfavorite(user: AbstractBaseUser, conference: Conference) -> bool:
    """Remove *conference* from *user*'s favorites."""
    deleted, _ = Favorite.objects.filter(user=user, conference=conference).delete()
    if deleted:
        logger.info("User %s unfavorited conference %s", user.pk, conference.pk)
    return bool(deleted)


def attend(user: AbstractBaseUser, conference: Conference) -> bool:
    """Record that *user* is attending *conference*."""
    if conference.attendees.filter(pk=user.pk).exists():
        return False
    conference.attendees.add(user)
    logger.info("User %s is attending conference %s", user.pk, conference.pk)
    return True


def unattend(user: AbstractBaseUser, conference: Conference) -> bool:
    """Drop *user* from *conference*'s attendees."""
    if not conference.attendees.filter(pk=user.pk).exists():
        return False
    conference.attendees.remove(user)
    logger.info("User %s is no longer attending conference %s", user.pk, conference.pk)
    return True
