"""Django admin configuration for the talks app."""

from django.contrib import admin, messages
from django.db.models import QuerySet
from django.http import HttpRequest

from django_symposium.talks.models import Acceptance, Bio, Submission, Talk, TalkRevision


class TalkRevisionInline(admin.TabularInline):
    """Read-only history of a talk's revisions.

    Revisions are immutable, so the inline never allows edits or additions.
    """

    model = TalkRevision
    extra = 0
    can_delete = False
    fields = ("title", "type", "level", "length", "created_at")
    readonly_fields = fields

    def has_add_permission(self, request: HttpRequest, obj: Talk | None = None) -> bool:  # noqa: ARG002
        return False


class SubmissionInline(admin.TabularInline):
    """Conferences the talk has been submitted to."""

    model = Submission
    extra = 0
    fields = ("conference", "created_at")
    readonly_fields = ("created_at",)
    raw_id_fields = ("conference",)


@admin.register(Talk)
class TalkAdmin(admin.ModelAdmin):
    """Admin interface for talks with inline revision history."""

    list_display = ("__str__", "author", "public", "created_at")
    list_filter = ("public",)
    search_fields = ("revisions__title", "author__email")
    raw_id_fields = ("author",)
    inlines = (TalkRevisionInline, SubmissionInline)


@admin.register(Bio)
class BioAdmin(admin.ModelAdmin):
    """Admin interface for speaker bios."""

    list_display = ("nickname", "user", "public", "updated_at")
    list_filter = ("public",)
    search_fields = ("nickname", "user__email")
    raw_id_fields = ("user",)


class AcceptanceInline(admin.StackedInline):
    """At most one acceptance per submission."""

    model = Acceptance
    extra = 0
    max_num = 1
    readonly_fields = ("created_at",)


@admin.register(Submission)
class SubmissionAdmin(admin.ModelAdmin):
    """Admin interface for reviewing submissions.

    The ``accept_submissions`` action creates the acceptance record for
    each selected submission that does not have one yet.
    """

    list_display = ("talk", "conference", "is_accepted", "created_at")
    list_filter = ("conference",)
    search_fields = ("talk__revisions__title", "conference__title")
    raw_id_fields = ("talk", "conference")
    inlines = (AcceptanceInline,)
    actions = ["accept_submissions"]

    @admin.display(boolean=True, description="Accepted")
    def is_accepted(self, obj: Submission) -> bool:
        return obj.is_accepted

    @admin.action(description="Accept selected submissions")
    def accept_submissions(self, request: HttpRequest, queryset: QuerySet[Submission]) -> None:
        created = 0
        for submission in queryset:
            _, was_created = Acceptance.objects.get_or_create(submission=submission)
            created += int(was_created)
        self.message_user(request, f"Accepted {created} submission(s).", level=messages.SUCCESS)
