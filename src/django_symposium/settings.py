"""Typed configuration for django-symposium.

Reads a single ``SYMPOSIUM`` dict from Django settings and exposes it as
composed, frozen dataclasses with sensible defaults.

Usage::

    from django_symposium.settings import get_config

    config = get_config()
    config.features.registration_enabled
    config.profile_picture_max_bytes
"""

import functools
from collections.abc import Mapping
from dataclasses import dataclass, field

from django.conf import settings
from django.test.signals import setting_changed


@dataclass(frozen=True, slots=True)
class FeaturesConfig:
    """Feature toggles for enabling/disabling parts of the site.

    All features are enabled by default. Set to ``False`` in
    ``SYMPOSIUM['features']`` to disable.
    """

    registration_enabled: bool = True
    public_profiles_enabled: bool = True
    bios_enabled: bool = True


@dataclass(frozen=True, slots=True)
class SymposiumConfig:
    """Top-level django-symposium configuration."""

    features: FeaturesConfig = field(default_factory=FeaturesConfig)
    profile_picture_max_bytes: int = 2 * 1024 * 1024
    profile_picture_extensions: tuple[str, ...] = ("jpg", "jpeg", "png", "gif")
    dashboard_conference_limit: int = 10


@functools.lru_cache(maxsize=1)
def get_config() -> SymposiumConfig:
    """Build and return the symposium configuration.

    Reads ``settings.SYMPOSIUM`` (a plain dict) and returns a frozen
    :class:`SymposiumConfig`.  The result is cached; the cache is cleared
    automatically when Django's ``setting_changed`` signal fires (e.g. inside
    ``override_settings``).
    """
    raw = getattr(settings, "SYMPOSIUM", {})
    if not isinstance(raw, Mapping):
        msg = "SYMPOSIUM must be a mapping (dict-like object)"
        raise TypeError(msg)
    raw_data = dict(raw)

    features_data = raw_data.pop("features", {})
    if not isinstance(features_data, Mapping):
        msg = "SYMPOSIUM['features'] must be a mapping (dict-like object)"
        raise TypeError(msg)

    if "profile_picture_extensions" in raw_data:
        extensions = raw_data["profile_picture_extensions"]
        if isinstance(extensions, str) or not isinstance(extensions, (list, tuple)):
            msg = "SYMPOSIUM['profile_picture_extensions'] must be a list or tuple of strings"
            raise TypeError(msg)
        raw_data["profile_picture_extensions"] = tuple(ext.lower().lstrip(".") for ext in extensions)

    config = SymposiumConfig(
        features=FeaturesConfig(**dict(features_data)),
        **raw_data,
    )
    _validate_symposium_config(config)
    return config


def _validate_symposium_config(config: SymposiumConfig) -> None:
    """Validate high-impact configuration values with clear error messages."""
    if not isinstance(config.profile_picture_max_bytes, int) or config.profile_picture_max_bytes <= 0:
        msg = "SYMPOSIUM['profile_picture_max_bytes'] must be a positive integer"
        raise ValueError(msg)
    if not config.profile_picture_extensions:
        msg = "SYMPOSIUM['profile_picture_extensions'] must not be empty"
        raise ValueError(msg)
    if not isinstance(config.dashboard_conference_limit, int) or config.dashboard_conference_limit <= 0:
        msg = "SYMPOSIUM['dashboard_conference_limit'] must be a positive integer"
        raise ValueError(msg)
    for name in ("registration_enabled", "public_profiles_enabled", "bios_enabled"):
        if not isinstance(getattr(config.features, name), bool):
            msg = f"SYMPOSIUM['features']['{name}'] must be a boolean"
            raise TypeError(msg)


def _clear_config_cache(*, setting: str, **kwargs: object) -> None:  # noqa: ARG001
    """Clear the cached config when Django settings change during tests."""
    if setting == "SYMPOSIUM":
        get_config.cache_clear()


setting_changed.connect(_clear_config_cache, dispatch_uid="django_symposium.settings.clear_config_cache")
