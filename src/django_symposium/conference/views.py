"""Views for the conference app.

Provides the conference listing and detail pages plus the per-user
dismiss/favorite/attend toggles. Toggles are plain GET links that redirect
back to ``?next=`` (when it is a safe local URL) or the conference list.
"""

from collections.abc import Callable
from typing import ClassVar

from django.contrib import messages
from django.contrib.auth.mixins import LoginRequiredMixin
from django.db.models import QuerySet
from django.http import HttpRequest, HttpResponse
from django.shortcuts import get_object_or_404, redirect
from django.urls import reverse
from django.utils.http import url_has_allowed_host_and_scheme
from django.views import View
from django.views.generic import DetailView, ListView

from django_symposium.conference import services
from django_symposium.conference.models import Conference
from django_symposium.talks.transformers import talks_for_conference


class ConferenceListView(ListView):
    """Approved conferences, minus the ones the signed-in user dismissed.

    ``?filter=dismissed`` lists only dismissed conferences and
    ``?filter=favorites`` only favorites.
    """

    template_name = "django_symposium/conference/conference_list.html"
    context_object_name = "conferences"
    paginate_by = 50

    def get_queryset(self) -> QuerySet[Conference]:
        """Return approved conferences filtered for the current user.

        Returns:
            A queryset of Conference instances ordered by start date.
        """
        qs = Conference.objects.approved()
        user = self.request.user
        if not user.is_authenticated:
            return qs
        current_filter = self.request.GET.get("filter", "")
        if current_filter == "dismissed":
            return qs.dismissed_by(user)
        if current_filter == "favorites":
            return qs.favorited_by(user)
        return qs.undismissed_by(user)

    def get_context_data(self, **kwargs: object) -> dict[str, object]:
        """Add the active filter and the user's favorite ids to context."""
        context = super().get_context_data(**kwargs)
        context["current_filter"] = self.request.GET.get("filter", "")
        user = self.request.user
        if user.is_authenticated:
            context["favorite_ids"] = set(user.favorite_rows.values_list("conference_id", flat=True))
            context["dismissed_ids"] = set(user.dismissed_conference_rows.values_list("conference_id", flat=True))
        else:
            context["favorite_ids"] = set()
            context["dismissed_ids"] = set()
        return context


class ConferenceDetailView(DetailView):
    """One conference, with the signed-in user's talks and their status."""

    template_name = "django_symposium/conference/conference_detail.html"
    context_object_name = "conference"
    queryset = Conference.objects.approved()

    def get_context_data(self, **kwargs: object) -> dict[str, object]:
        """Add ``talks`` (projected per conference) and marker flags."""
        context = super().get_context_data(**kwargs)
        conference: Conference = self.object
        user = self.request.user
        if user.is_authenticated:
            context["talks"] = talks_for_conference(user, conference)
            context["is_dismissed"] = conference.is_dismissed_by(user)
            context["is_favorited"] = conference.is_favorited_by(user)
            context["is_attending"] = conference.attendees.filter(pk=user.pk).exists()
        else:
            context["talks"] = []
        return context


class ConferenceToggleView(LoginRequiredMixin, View):
    """Base view that applies one marker service to the URL's conference.

    Subclasses set ``action`` to one of the functions in
    :mod:`django_symposium.conference.services` and ``message`` to the
    confirmation text (formatted with the conference title).
    """

    action: ClassVar[Callable[..., bool]]
    message: ClassVar[str] = ""

    def get(self, request: HttpRequest, pk: int) -> HttpResponse:
        """Apply the toggle and redirect."""
        conference = get_object_or_404(Conference, pk=pk)
        self.action(request.user, conference)
        messages.success(request, self.message.format(title=conference.title))
        return redirect(self.get_redirect_url())

    def get_redirect_url(self) -> str:
        next_url = self.request.GET.get("next", "")
        if next_url and url_has_allowed_host_and_scheme(
            next_url,
            allowed_hosts={self.request.get_host()},
            require_https=self.request.is_secure(),
        ):
            return next_url
        return reverse("conference:list")


class DismissConferenceView(ConferenceToggleView):
    action = staticmethod(services.dismiss)
    message = "Dismissed {title}."


class UndismissConferenceView(ConferenceToggleView):
    action = staticmethod(services.undismiss)
    message = "Restored {title}."


class FavoriteConferenceView(ConferenceToggleView):
    action = staticmethod(services.favorite)
    message = "Added {title} to your favorites."


class UnfavoriteConferenceView(ConferenceToggleView):
    action = staticmethod(services.unfavorite)
    message = "Removed {title} from your favorites."


class AttendConferenceView(ConferenceToggleView):
    action = staticmethod(services.attend)
    message = "You are attending {title}."


class UnattendConferenceView(ConferenceToggleView):
    action = staticmethod(services.unattend)
    message = "You are no longer attending {title}."
