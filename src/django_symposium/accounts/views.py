"""Views for the accounts app.

Covers sign-up, login/logout, the dashboard, profile settings, password
reset, public speaker profiles, and account deletion. The signed-in user is
read from the request here and passed explicitly to the services.
"""

from django.contrib import messages
from django.contrib.auth import login, logout, update_session_auth_hash
from django.contrib.auth import views as auth_views
from django.contrib.auth.mixins import LoginRequiredMixin
from django.http import Http404, HttpRequest, HttpResponse
from django.shortcuts import get_object_or_404, redirect, render
from django.urls import reverse, reverse_lazy
from django.utils.http import url_has_allowed_host_and_scheme
from django.views import View
from django.views.generic import DetailView, FormView, TemplateView, UpdateView

from django_symposium.accounts.forms import LoginForm, ProfileForm, RegistrationForm, ResetPasswordForm
from django_symposium.accounts.models import User
from django_symposium.accounts.services import AccountDeletionError, delete_account
from django_symposium.conference.models import Conference
from django_symposium.features import FeatureRequiredMixin, is_feature_enabled
from django_symposium.settings import get_config
from django_symposium.talks.models import Talk

_BACKEND = "django.contrib.auth.backends.ModelBackend"


class LandingView(TemplateView):
    """Public landing page."""

    template_name = "django_symposium/accounts/landing.html"


class RegisterView(FeatureRequiredMixin, FormView):
    """Create an account and sign the new user in."""

    required_feature = "registration"
    template_name = "django_symposium/accounts/register.html"
    form_class = RegistrationForm
    success_url = reverse_lazy("accounts:dashboard")

    def form_valid(self, form: RegistrationForm) -> HttpResponse:
        user = form.save()
        login(self.request, user, backend=_BACKEND)
        messages.success(self.request, "Welcome! Your account has been created.")
        return super().form_valid(form)


class LoginView(FormView):
    """Email/password login."""

    template_name = "django_symposium/accounts/login.html"
    form_class = LoginForm

    def get_form_kwargs(self) -> dict[str, object]:
        kwargs = super().get_form_kwargs()
        kwargs["request"] = self.request
        return kwargs

    def get_success_url(self) -> str:
        next_url = self.request.POST.get("next") or self.request.GET.get("next", "")
        if next_url and url_has_allowed_host_and_scheme(
            next_url,
            allowed_hosts={self.request.get_host()},
            require_https=self.request.is_secure(),
        ):
            return next_url
        return reverse("accounts:dashboard")

    def get_context_data(self, **kwargs: object) -> dict[str, object]:
        context = super().get_context_data(**kwargs)
        context["next"] = self.request.GET.get("next", "")
        return context

    def form_valid(self, form: LoginForm) -> HttpResponse:
        login(self.request, form.get_user())
        return super().form_valid(form)


class LogoutView(View):
    """Sign out and return to the landing page."""

    def get(self, request: HttpRequest) -> HttpResponse:
        logout(request)
        return redirect("accounts:landing")

    post = get


class DashboardView(LoginRequiredMixin, TemplateView):
    """The signed-in user's talks and favorited conferences."""

    template_name = "django_symposium/accounts/dashboard.html"

    def get_context_data(self, **kwargs: object) -> dict[str, object]:
        context = super().get_context_data(**kwargs)
        user = self.request.user
        context["talks"] = Talk.objects.filter(author=user).prefetch_related("revisions")
        limit = get_config().dashboard_conference_limit
        context["favorite_conferences"] = Conference.objects.approved().favorited_by(user)[:limit]
        return context


class AccountView(LoginRequiredMixin, TemplateView):
    """Summary of the signed-in user's profile settings."""

    template_name = "django_symposium/accounts/account.html"

    def get_context_data(self, **kwargs: object) -> dict[str, object]:
        context = super().get_context_data(**kwargs)
        context["account"] = self.request.user
        return context


class AccountEditView(LoginRequiredMixin, UpdateView):
    """Edit the signed-in user's profile, credentials, and picture."""

    template_name = "django_symposium/accounts/account_edit.html"
    form_class = ProfileForm
    success_url = reverse_lazy("accounts:account")

    def get_object(self, queryset: object = None) -> User:  # noqa: ARG002
        return self.request.user

    def form_valid(self, form: ProfileForm) -> HttpResponse:
        response = super().form_valid(form)
        if form.cleaned_data.get("password"):
            update_session_auth_hash(self.request, self.object)
        messages.success(self.request, "Successfully edited account.")
        return response


class AccountDeleteView(LoginRequiredMixin, View):
    """Confirm and perform deletion of the signed-in user's account."""

    template_name = "django_symposium/accounts/account_delete.html"

    def get(self, request: HttpRequest) -> HttpResponse:
        """Render the confirmation page."""
        return render(request, self.template_name)

    def post(self, request: HttpRequest) -> HttpResponse:
        """Delete the account, then sign out.

        On failure nothing is deleted and the user stays signed in.
        """
        try:
            delete_account(request.user)
        except AccountDeletionError:
            messages.error(request, "We were unable to delete your account. Please try again.")
            return redirect("accounts:account")

        logout(request)
        messages.success(request, "Successfully deleted account.")
        return redirect("accounts:landing")


class PasswordResetView(auth_views.PasswordResetView):
    """Request a password reset email."""

    template_name = "django_symposium/accounts/password_reset.html"
    email_template_name = "django_symposium/accounts/password_reset_email.txt"
    subject_template_name = "django_symposium/accounts/password_reset_subject.txt"
    success_url = reverse_lazy("accounts:password-reset")

    def form_valid(self, form: object) -> HttpResponse:
        response = super().form_valid(form)
        messages.success(self.request, "We have emailed your password reset link!")
        return response


class PasswordResetConfirmView(auth_views.PasswordResetConfirmView):
    """Set a new password from an emailed link, then sign in."""

    template_name = "django_symposium/accounts/password_reset_confirm.html"
    form_class = ResetPasswordForm
    post_reset_login = True
    post_reset_login_backend = _BACKEND
    success_url = reverse_lazy("accounts:dashboard")

    def form_valid(self, form: ResetPasswordForm) -> HttpResponse:
        response = super().form_valid(form)
        messages.success(self.request, "Your password has been reset!")
        return response


class PublicProfileView(FeatureRequiredMixin, DetailView):
    """Public speaker page with public talks and bios."""

    required_feature = "public_profiles"
    template_name = "django_symposium/accounts/public_profile.html"
    context_object_name = "speaker"

    def get_object(self, queryset: object = None) -> User:  # noqa: ARG002
        speaker = get_object_or_404(User, profile_slug=self.kwargs["profile_slug"], is_active=True)
        if not speaker.enable_profile:
            raise Http404("Profile is not public")
        return speaker

    def get_context_data(self, **kwargs: object) -> dict[str, object]:
        context = super().get_context_data(**kwargs)
        speaker: User = self.object
        context["talks"] = speaker.talks.filter(public=True).prefetch_related("revisions")
        context["bios"] = speaker.bios.filter(public=True) if is_feature_enabled("bios") else []
        context["contact_email"] = speaker.email if speaker.allow_profile_contact else None
        return context
