"""Tests for the feature toggle system."""

import pytest
from django.http import Http404, HttpRequest, HttpResponse
from django.test import override_settings
from django.views import View

from django_symposium.context_processors import symposium_features
from django_symposium.features import FeatureRequiredMixin, is_feature_enabled, require_feature
from django_symposium.settings import get_config

ALL_FEATURES = (
    "registration",
    "public_profiles",
    "bios",
)

# ---------------------------------------------------------------------------
# FeaturesConfig defaults
# ---------------------------------------------------------------------------


class TestFeaturesConfigDefaults:
    """All features are enabled by default."""

    def test_all_features_enabled_by_default(self) -> None:
        config = get_config().features
        for feature in ALL_FEATURES:
            assert getattr(config, f"{feature}_enabled") is True

    def test_features_config_is_frozen(self) -> None:
        config = get_config().features
        with pytest.raises(AttributeError):
            config.registration_enabled = False  # type: ignore[misc]


# ---------------------------------------------------------------------------
# is_feature_enabled
# ---------------------------------------------------------------------------


class TestIsFeatureEnabled:
    """Tests for the ``is_feature_enabled`` helper."""

    @pytest.mark.parametrize("feature", ALL_FEATURES)
    def test_returns_true_by_default(self, feature: str) -> None:
        assert is_feature_enabled(feature) is True

    @pytest.mark.parametrize("feature", ALL_FEATURES)
    def test_returns_false_when_disabled(self, feature: str) -> None:
        with override_settings(SYMPOSIUM={"features": {f"{feature}_enabled": False}}):
            assert is_feature_enabled(feature) is False

    def test_disabling_one_feature_leaves_others_enabled(self) -> None:
        with override_settings(SYMPOSIUM={"features": {"bios_enabled": False}}):
            assert is_feature_enabled("registration") is True
            assert is_feature_enabled("public_profiles") is True

    def test_unknown_feature_raises_value_error(self) -> None:
        with pytest.raises(ValueError, match="Unknown feature"):
            is_feature_enabled("nonexistent_module")


# ---------------------------------------------------------------------------
# require_feature
# ---------------------------------------------------------------------------


class TestRequireFeature:
    """Tests for the ``require_feature`` helper."""

    def test_does_nothing_when_enabled(self) -> None:
        require_feature("registration")

    def test_raises_http404_when_disabled(self) -> None:
        with (
            override_settings(SYMPOSIUM={"features": {"registration_enabled": False}}),
            pytest.raises(Http404, match="registration"),
        ):
            require_feature("registration")

    def test_raises_value_error_for_unknown_feature(self) -> None:
        with pytest.raises(ValueError, match="Unknown feature"):
            require_feature("bogus")


# ---------------------------------------------------------------------------
# FeatureRequiredMixin
# ---------------------------------------------------------------------------


class _StubView(FeatureRequiredMixin, View):
    """Minimal view for testing the mixin."""

    required_feature = "registration"

    def get(self, request: HttpRequest) -> HttpResponse:
        return HttpResponse("OK")


class _NoFeatureView(FeatureRequiredMixin, View):
    """View with no required feature set."""

    def get(self, request: HttpRequest) -> HttpResponse:
        return HttpResponse("OK")


class _MultiFeatureView(FeatureRequiredMixin, View):
    """View requiring multiple features."""

    required_feature = ("public_profiles", "bios")

    def get(self, request: HttpRequest) -> HttpResponse:
        return HttpResponse("OK")


class TestFeatureRequiredMixin:
    """Tests for ``FeatureRequiredMixin``."""

    def _make_request(self) -> HttpRequest:
        request = HttpRequest()
        request.method = "GET"
        return request

    def test_dispatches_when_feature_enabled(self) -> None:
        view = _StubView.as_view()
        response = view(self._make_request())
        assert response.status_code == 200

    def test_returns_404_when_feature_disabled(self) -> None:
        with override_settings(SYMPOSIUM={"features": {"registration_enabled": False}}):
            view = _StubView.as_view()
            with pytest.raises(Http404):
                view(self._make_request())

    def test_dispatches_when_no_required_feature_set(self) -> None:
        view = _NoFeatureView.as_view()
        response = view(self._make_request())
        assert response.status_code == 200

    def test_multi_feature_dispatches_when_all_enabled(self) -> None:
        view = _MultiFeatureView.as_view()
        response = view(self._make_request())
        assert response.status_code == 200

    def test_multi_feature_returns_404_when_second_disabled(self) -> None:
        with override_settings(SYMPOSIUM={"features": {"bios_enabled": False}}):
            view = _MultiFeatureView.as_view()
            with pytest.raises(Http404):
                view(self._make_request())


# ---------------------------------------------------------------------------
# Context processor
# ---------------------------------------------------------------------------


class TestSymposiumFeaturesContextProcessor:
    """Tests for the ``symposium_features`` context processor."""

    def test_exposes_feature_config(self) -> None:
        context = symposium_features(HttpRequest())
        assert context["symposium_features"].registration_enabled is True

    def test_reflects_current_settings(self) -> None:
        with override_settings(SYMPOSIUM={"features": {"bios_enabled": False}}):
            context = symposium_features(HttpRequest())
            assert context["symposium_features"].bios_enabled is False
