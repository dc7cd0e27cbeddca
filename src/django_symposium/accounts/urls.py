"""URL configuration for the accounts app.

Mount at the site root in the host project::

    urlpatterns = [
        path("", include("django_symposium.accounts.urls")),
    ]
"""

from django.urls import path

from django_symposium.accounts.views import (
    AccountDeleteView,
    AccountEditView,
    AccountView,
    DashboardView,
    LandingView,
    LoginView,
    LogoutView,
    PasswordResetConfirmView,
    PasswordResetView,
    PublicProfileView,
    RegisterView,
)

app_name = "accounts"

urlpatterns = [
    path("", LandingView.as_view(), name="landing"),
    path("register/", RegisterView.as_view(), name="register"),
    path("login/", LoginView.as_view(), name="login"),
    path("log-out/", LogoutView.as_view(), name="logout"),
    path("dashboard/", DashboardView.as_view(), name="dashboard"),
    path("account/", AccountView.as_view(), name="account"),
    path("account/edit/", AccountEditView.as_view(), name="account-edit"),
    path("account/delete/", AccountDeleteView.as_view(), name="account-delete"),
    path("password/reset/", PasswordResetView.as_view(), name="password-reset"),
    path("password/email/", PasswordResetView.as_view(), name="password-email"),
    path(
        "password/reset/<uidb64>/<token>/",
        PasswordResetConfirmView.as_view(),
        name="password-reset-confirm",
    ),
    path("u/<slug:profile_slug>/", PublicProfileView.as_view(), name="public-profile"),
]
