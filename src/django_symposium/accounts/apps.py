"""Django app configuration for the accounts app."""

from django.apps import AppConfig


class DjangoSymposiumAccountsConfig(AppConfig):
    """Configuration for the accounts app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "django_symposium.accounts"
    label = "symposium_accounts"
    verbose_name = "Accounts"
