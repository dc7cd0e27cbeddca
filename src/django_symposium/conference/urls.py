"""URL configuration for the conference app.

Mount under a ``conferences/`` prefix in the host project::

    urlpatterns = [
        path("conferences/", include("django_symposium.conference.urls")),
    ]
"""

from django.urls import path

from django_symposium.conference.views import (
    AttendConferenceView,
    ConferenceDetailView,
    ConferenceListView,
    DismissConferenceView,
    FavoriteConferenceView,
    UnattendConferenceView,
    UndismissConferenceView,
    UnfavoriteConferenceView,
)

app_name = "conference"

urlpatterns = [
    path("", ConferenceListView.as_view(), name="list"),
    path("<int:pk>/", ConferenceDetailView.as_view(), name="detail"),
    path("<int:pk>/dismiss/", DismissConferenceView.as_view(), name="dismiss"),
    path("<int:pk>/undismiss/", UndismissConferenceView.as_view(), name="undismiss"),
    path("<int:pk>/favorite/", FavoriteConferenceView.as_view(), name="favorite"),
    path("<int:pk>/unfavorite/", UnfavoriteConferenceView.as_view(), name="unfavorite"),
    path("<int:pk>/attend/", AttendConferenceView.as_view(), name="attend"),
    path("<int:pk>/unattend/", UnattendConferenceView.as_view(), name="unattend"),
]
