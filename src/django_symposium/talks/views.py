"""Views for the talks app.

Talks, bios, and submissions are private to their owner: every lookup is
scoped to ``request.user`` and anything else resolves to a 404.
"""

from django.contrib import messages
from django.contrib.auth.mixins import LoginRequiredMixin
from django.db.models import QuerySet
from django.http import HttpRequest, HttpResponse
from django.shortcuts import get_object_or_404, redirect, render
from django.urls import reverse, reverse_lazy
from django.views import View
from django.views.generic import CreateView, DeleteView, DetailView, ListView, UpdateView

from django_symposium.conference.models import Conference
from django_symposium.features import FeatureRequiredMixin
from django_symposium.talks.forms import BioForm, SubmissionForm, TalkRevisionForm
from django_symposium.talks.models import Bio, Submission, Talk
from django_symposium.talks.services import create_talk, revise_talk, submit_talk, withdraw_submission


class OwnedTalkMixin(LoginRequiredMixin):
    """Resolve ``pk`` to one of the signed-in user's talks."""

    kwargs: dict[str, object]
    request: HttpRequest

    def get_talk(self) -> Talk:
        """Return the talk, or raise Http404 if it belongs to someone else."""
        return get_object_or_404(Talk, pk=self.kwargs["pk"], author=self.request.user)


class TalkListView(LoginRequiredMixin, ListView):
    """The signed-in user's talks."""

    template_name = "django_symposium/talks/talk_list.html"
    context_object_name = "talks"

    def get_queryset(self) -> QuerySet[Talk]:
        return Talk.objects.filter(author=self.request.user).prefetch_related("revisions")


class TalkCreateView(LoginRequiredMixin, View):
    """Create a talk together with its first revision."""

    template_name = "django_symposium/talks/talk_form.html"

    def get(self, request: HttpRequest) -> HttpResponse:
        return render(request, self.template_name, {"form": TalkRevisionForm()})

    def post(self, request: HttpRequest) -> HttpResponse:
        form = TalkRevisionForm(request.POST)
        if not form.is_valid():
            return render(request, self.template_name, {"form": form})
        talk = create_talk(request.user, form.cleaned_data, public=form.cleaned_data["public"])
        messages.success(request, "Successfully created new talk.")
        return redirect(talk.get_absolute_url())


class TalkDetailView(OwnedTalkMixin, DetailView):
    """A talk's current revision, its history, and its submissions."""

    template_name = "django_symposium/talks/talk_detail.html"
    context_object_name = "talk"

    def get_object(self, queryset: QuerySet[Talk] | None = None) -> Talk:  # noqa: ARG002
        return self.get_talk()

    def get(self, request: HttpRequest, *args: object, **kwargs: object) -> HttpResponse:  # noqa: ARG002
        self.object = self.get_object()
        if not self.object.revisions.exists():
            messages.info(request, "This talk has no content yet. Save a first revision.")
            return redirect("talks:edit", pk=self.object.pk)
        context = self.get_context_data(object=self.object)
        return self.render_to_response(context)

    def get_context_data(self, **kwargs: object) -> dict[str, object]:
        context = super().get_context_data(**kwargs)
        talk: Talk = self.object
        context["current"] = talk.current()
        context["revisions"] = talk.revisions.all()
        context["submissions"] = talk.submissions.select_related("conference", "acceptance")
        return context


class TalkUpdateView(OwnedTalkMixin, View):
    """Edit a talk by recording a new revision."""

    template_name = "django_symposium/talks/talk_form.html"

    def get(self, request: HttpRequest, pk: int) -> HttpResponse:  # noqa: ARG002
        talk = self.get_talk()
        # A talk created without content gets its first revision here.
        current = talk.revisions.first()
        form = TalkRevisionForm(instance=current, initial={"public": talk.public})
        return render(request, self.template_name, {"form": form, "talk": talk})

    def post(self, request: HttpRequest, pk: int) -> HttpResponse:  # noqa: ARG002
        talk = self.get_talk()
        form = TalkRevisionForm(request.POST)
        if not form.is_valid():
            return render(request, self.template_name, {"form": form, "talk": talk})
        revise_talk(talk, form.cleaned_data, public=form.cleaned_data["public"])
        messages.success(request, "Successfully edited talk.")
        return redirect(talk.get_absolute_url())


class TalkDeleteView(OwnedTalkMixin, View):
    """POST-only view that deletes a talk with its revisions and submissions."""

    def post(self, request: HttpRequest, pk: int) -> HttpResponse:  # noqa: ARG002
        talk = self.get_talk()
        talk.delete()
        messages.success(request, "Successfully deleted talk.")
        return redirect("talks:list")


class BioOwnerMixin(LoginRequiredMixin, FeatureRequiredMixin):
    """Scope bio views to the signed-in user; 404 when bios are disabled."""

    required_feature = "bios"
    request: HttpRequest

    def get_queryset(self) -> QuerySet[Bio]:
        return Bio.objects.filter(user=self.request.user)


class BioListView(BioOwnerMixin, ListView):
    """The signed-in user's bios."""

    template_name = "django_symposium/talks/bio_list.html"
    context_object_name = "bios"


class BioCreateView(BioOwnerMixin, CreateView):
    """Create a bio for the signed-in user."""

    template_name = "django_symposium/talks/bio_form.html"
    form_class = BioForm
    success_url = reverse_lazy("talks:bio-list")

    def form_valid(self, form: BioForm) -> HttpResponse:
        form.instance.user = self.request.user
        messages.success(self.request, "Successfully created new bio.")
        return super().form_valid(form)


class BioUpdateView(BioOwnerMixin, UpdateView):
    """Edit one of the signed-in user's bios."""

    template_name = "django_symposium/talks/bio_form.html"
    form_class = BioForm
    success_url = reverse_lazy("talks:bio-list")

    def form_valid(self, form: BioForm) -> HttpResponse:
        messages.success(self.request, "Successfully edited bio.")
        return super().form_valid(form)


class BioDeleteView(BioOwnerMixin, DeleteView):
    """Delete one of the signed-in user's bios (POST)."""

    http_method_names = ["post"]
    success_url = reverse_lazy("talks:bio-list")

    def form_valid(self, form: object) -> HttpResponse:
        messages.success(self.request, "Successfully deleted bio.")
        return super().form_valid(form)


class SubmissionCreateView(LoginRequiredMixin, View):
    """POST-only view that submits a talk to a conference."""

    def post(self, request: HttpRequest) -> HttpResponse:
        """Handle the submission form.

        Submitting the same talk twice is harmless: the existing submission
        is kept.

        Returns:
            A redirect to the conference detail page.
        """
        form = SubmissionForm(request.POST)
        if not form.is_valid():
            messages.error(request, "Invalid submission.")
            return redirect("conference:list")

        talk = get_object_or_404(Talk, pk=form.cleaned_data["talk_id"], author=request.user)
        conference = get_object_or_404(Conference.objects.approved(), pk=form.cleaned_data["conference_id"])
        _, created = submit_talk(talk, conference)
        if created:
            messages.success(request, f"{talk} submitted to {conference.title}.")
        else:
            messages.info(request, "This talk has already been submitted to this conference.")
        return redirect(reverse("conference:detail", args=[conference.pk]))


class SubmissionDeleteView(LoginRequiredMixin, View):
    """POST-only view that withdraws a submission."""

    def post(self, request: HttpRequest, pk: int) -> HttpResponse:
        submission = get_object_or_404(
            Submission.objects.select_related("conference", "talk"),
            pk=pk,
            talk__author=request.user,
        )
        conference = submission.conference
        withdraw_submission(submission)
        messages.success(request, f"Submission to {conference.title} withdrawn.")
        return redirect(reverse("conference:detail", args=[conference.pk]))
