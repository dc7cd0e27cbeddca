"""Account lifecycle service.

Deleting an account removes every row that exists only in that user's
context. The deletes run as an explicit ordered sequence inside a single
transaction, so a failure at any step rolls back all earlier steps and no
partial state is ever committed. Conferences and other users' association
rows are never touched.
"""

import logging

from django.contrib.auth.base_user import AbstractBaseUser
from django.db import DatabaseError, transaction

from django_symposium.conference.models import Conference, DismissedConference, Favorite
from django_symposium.talks.models import Acceptance, Bio, Submission, Talk, TalkRevision

logger = logging.getLogger(__name__)


class AccountDeletionError(Exception):
    """Raised when an account could not be deleted; nothing was removed."""


def delete_account(user: AbstractBaseUser) -> dict[str, int]:
    """Delete *user* and everything owned by them.

    Removal order: acceptances and submissions of the user's talks, talk
    revisions, talks, bios, dismissed-conference rows, favorite rows,
    attendance rows, and finally the user row.

    Args:
        user: The account to delete.

    Returns:
        The number of rows removed per table.

    Raises:
        AccountDeletionError: If any delete fails. The transaction is rolled
            back and every row is left in place.
    """
    user_pk = user.pk
    talks = Talk.objects.filter(author_id=user_pk)
    attendance = Conference.attendees.through.objects.filter(user_id=user_pk)

    steps = (
        ("acceptances", Acceptance.objects.filter(submission__talk__in=talks)),
        ("submissions", Submission.objects.filter(talk__in=talks)),
        ("talk_revisions", TalkRevision.objects.filter(talk__in=talks)),
        ("talks", talks),
        ("bios", Bio.objects.filter(user_id=user_pk)),
        ("dismissed_conferences", DismissedConference.objects.filter(user_id=user_pk)),
        ("favorites", Favorite.objects.filter(user_id=user_pk)),
        ("conference_attendees", attendance),
    )

    counts: dict[str, int] = {}
    try:
        with transaction.atomic():
            for table, queryset in steps:
                counts[table], _ = queryset.delete()
            user.delete()
    except DatabaseError as exc:
        logger.exception("Deleting account %s failed; all changes rolled back", user_pk)
        msg = f"Account {user_pk} could not be deleted"
        raise AccountDeletionError(msg) from exc

    counts["users"] = 1
    logger.info(
        "Deleted account %s (%s)",
        user_pk,
        ", ".join(f"{table}={count}" for table, count in counts.items()),
    )
    return counts
