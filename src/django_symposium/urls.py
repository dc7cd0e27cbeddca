"""Root URL configuration for django-symposium.

Include it from the host project's ``ROOT_URLCONF``::

    urlpatterns = [
        path("admin/", admin.site.urls),
        path("", include("django_symposium.urls")),
    ]
"""

from django.urls import include, path

urlpatterns = [
    path("", include("django_symposium.accounts.urls")),
    path("conferences/", include("django_symposium.conference.urls")),
    path("", include("django_symposium.talks.urls")),
]
