"""Management command to delete an account and everything it owns.

Usage::

    manage.py delete_account speaker@example.com
    manage.py delete_account speaker@example.com --noinput
"""

import argparse

from django.core.management.base import BaseCommand, CommandError

from django_symposium.accounts.models import User
from django_symposium.accounts.services import AccountDeletionError, delete_account


class Command(BaseCommand):
    """Delete a user with their talks, revisions, bios, and conference markers."""

    help = "Delete a user account and all rows owned by it"

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """Register command-line arguments.

        Args:
            parser: The argument parser to add arguments to.
        """
        parser.add_argument("email", help="Email address of the account to delete.")
        parser.add_argument(
            "--noinput",
            "--no-input",
            action="store_false",
            dest="interactive",
            default=True,
            help="Do not prompt for confirmation.",
        )

    def handle(self, *args: object, **options: object) -> None:  # noqa: ARG002
        """Execute the deletion.

        Raises:
            CommandError: If the account does not exist, the operator
                declines, or the deletion fails.
        """
        email = str(options["email"])
        try:
            user = User.objects.get(email__iexact=email)
        except User.DoesNotExist:
            msg = f"No account with email '{email}' found."
            raise CommandError(msg) from None

        if options["interactive"]:
            answer = input(f"Delete {user.email} and all of their talks and bios? [y/N] ")
            if answer.strip().lower() not in {"y", "yes"}:
                msg = "Deletion cancelled."
                raise CommandError(msg)

        try:
            counts = delete_account(user)
        except AccountDeletionError as exc:
            raise CommandError(str(exc)) from exc

        for table, count in counts.items():
            self.stdout.write(f"  {table}: {count}")
        self.stdout.write(self.style.SUCCESS(f"Deleted account {email}."))
