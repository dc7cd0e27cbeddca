"""Django app configuration for the talks app."""

from django.apps import AppConfig


class DjangoSymposiumTalksConfig(AppConfig):
    """Configuration for the talks app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "django_symposium.talks"
    label = "symposium_talks"
    verbose_name = "Talks"
