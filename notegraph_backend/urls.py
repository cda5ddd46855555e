from django.urls import path, include

from core.views import api_running

urlpatterns = [
    path("", api_running),
    path("api/", include("core.urls")),
    path("api/", include("authapi.urls")),
    path("api/", include("notes.urls")),
]
