"""Django admin configuration for the accounts app."""

from django.contrib import admin, messages
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.contrib.auth.forms import BaseUserCreationForm
from django.db.models import QuerySet
from django.http import HttpRequest

from django_symposium.accounts.models import User
from django_symposium.accounts.services import AccountDeletionError, delete_account


class UserCreationForm(BaseUserCreationForm):
    """Admin "add user" form keyed on email."""

    class Meta:
        model = User
        fields = ("email", "name")


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Admin interface for speaker accounts.

    Deleting through the admin action runs the same ordered, transactional
    cleanup as the self-service "delete my account" page.
    """

    add_form = UserCreationForm
    ordering = ("email",)
    list_display = ("email", "name", "enable_profile", "is_staff", "is_active")
    list_filter = ("is_staff", "is_superuser", "is_active", "enable_profile")
    search_fields = ("email", "name", "profile_slug")
    actions = ["delete_accounts"]

    fieldsets = (
        (None, {"fields": ("email", "password")}),
        ("Personal info", {"fields": ("name",)}),
        (
            "Profile",
            {
                "fields": (
                    "profile_slug",
                    "profile_intro",
                    "profile_picture",
                    "enable_profile",
                    "allow_profile_contact",
                    "wants_notifications",
                ),
            },
        ),
        (
            "Permissions",
            {
                "fields": ("is_active", "is_staff", "is_superuser", "groups", "user_permissions"),
                "classes": ("collapse",),
            },
        ),
        ("Important dates", {"fields": ("last_login", "created_at")}),
    )
    add_fieldsets = (
        (
            None,
            {
                "classes": ("wide",),
                "fields": ("email", "name", "password1", "password2"),
            },
        ),
    )
    readonly_fields = ("last_login", "created_at")

    def get_actions(self, request: HttpRequest) -> dict[str, object]:
        actions = super().get_actions(request)
        actions.pop("delete_selected", None)
        return actions

    @admin.action(description="Delete selected accounts and their talks, bios, and markers")
    def delete_accounts(self, request: HttpRequest, queryset: QuerySet[User]) -> None:
        deleted = 0
        for user in queryset:
            try:
                delete_account(user)
            except AccountDeletionError:
                self.message_user(request, f"Could not delete {user.email}.", level=messages.ERROR)
            else:
                deleted += 1
        if deleted:
            self.message_user(request, f"Deleted {deleted} account(s).", level=messages.SUCCESS)
