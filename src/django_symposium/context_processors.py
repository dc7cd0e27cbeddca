"""Django context processors for django-symposium."""

from django.http import HttpRequest

from django_symposium.settings import FeaturesConfig, get_config


def symposium_features(request: HttpRequest) -> dict[str, FeaturesConfig]:  # noqa: ARG001
    """Expose feature toggle flags to templates.

    Add ``"django_symposium.context_processors.symposium_features"`` to the
    ``context_processors`` list in your ``TEMPLATES`` setting.

    Usage in templates::

        {% if symposium_features.registration_enabled %}
            <a href="{% url 'accounts:register' %}">Sign up</a>
        {% endif %}
    """
    return {"symposium_features": get_config().features}
