from django.urls import include, path

from tsp.views.health import healthz

urlpatterns = [
    path("healthz", healthz),
    path("api/", include("tsp.urls")),
]
