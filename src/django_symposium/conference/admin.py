"""Django admin configuration for the conference app."""

from django.contrib import admin

from django_symposium.conference.models import Conference, DismissedConference, Favorite


@admin.register(Conference)
class ConferenceAdmin(admin.ModelAdmin):
    """Admin interface for managing conferences.

    Groups fields into logical fieldsets: basic information, dates, and
    status. Attendees are edited with a horizontal filter widget.
    """

    list_display = ("title", "slug", "starts_at", "ends_at", "cfp_ends_at", "is_approved")
    list_filter = ("is_approved",)
    search_fields = ("title", "slug")
    prepopulated_fields = {"slug": ("title",)}
    filter_horizontal = ("attendees",)

    fieldsets = (
        (
            None,
            {
                "fields": ("title", "slug", "description", "url", "cfp_url"),
            },
        ),
        (
            "Dates",
            {
                "fields": ("starts_at", "ends_at", "cfp_starts_at", "cfp_ends_at"),
            },
        ),
        (
            "Attendance",
            {
                "fields": ("attendees",),
                "classes": ("collapse",),
            },
        ),
        (
            "Status",
            {
                "fields": ("is_approved",),
            },
        ),
    )


@admin.register(DismissedConference)
class DismissedConferenceAdmin(admin.ModelAdmin):
    """Read-mostly list of dismissed-conference markers."""

    list_display = ("user", "conference", "created_at")
    list_filter = ("conference",)
    search_fields = ("user__email", "conference__title")
    raw_id_fields = ("user", "conference")


@admin.register(Favorite)
class FavoriteAdmin(admin.ModelAdmin):
    """Read-mostly list of favorite-conference markers."""

    list_display = ("user", "conference", "created_at")
    list_filter = ("conference",)
    search_fields = ("user__email", "conference__title")
    raw_id_fields = ("user", "conference")
