"""URL configuration for the talks app.

Mount at the site root in the host project::

    urlpatterns = [
        path("", include("django_symposium.talks.urls")),
    ]
"""

from django.urls import path

from django_symposium.talks.views import (
    BioCreateView,
    BioDeleteView,
    BioListView,
    BioUpdateView,
    SubmissionCreateView,
    SubmissionDeleteView,
    TalkCreateView,
    TalkDeleteView,
    TalkDetailView,
    TalkListView,
    TalkUpdateView,
)

app_name = "talks"

urlpatterns = [
    path("talks/", TalkListView.as_view(), name="list"),
    path("talks/create/", TalkCreateView.as_view(), name="create"),
    path("talks/<int:pk>/", TalkDetailView.as_view(), name="detail"),
    path("talks/<int:pk>/edit/", TalkUpdateView.as_view(), name="edit"),
    path("talks/<int:pk>/delete/", TalkDeleteView.as_view(), name="delete"),
    path("bios/", BioListView.as_view(), name="bio-list"),
    path("bios/create/", BioCreateView.as_view(), name="bio-create"),
    path("bios/<int:pk>/edit/", BioUpdateView.as_view(), name="bio-edit"),
    path("bios/<int:pk>/delete/", BioDeleteView.as_view(), name="bio-delete"),
    path("submissions/", SubmissionCreateView.as_view(), name="submission-create"),
    path("submissions/<int:pk>/delete/", SubmissionDeleteView.as_view(), name="submission-delete"),
]
