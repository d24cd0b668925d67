"""
URL configuration for SeverKeyService project.
"""
from django.urls import include, path
from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularRedocView,
    SpectacularSwaggerView,
)

from core.views import HealthView

urlpatterns = [
    # Health check endpoints
    path("health/", HealthView.as_view(), name="health"),
    # OpenAPI Schema
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    # Swagger UI
    path(
        "api/docs/",
        SpectacularSwaggerView.as_view(url_name="schema"),
        name="swagger-ui",
    ),
    # ReDoc
    path(
        "api/redoc/",
        SpectacularRedocView.as_view(url_name="schema"),
        name="redoc",
    ),
    # API endpoints
    path("api/", include("api.v1.users.urls")),
    path("api/", include("api.v1.chats.urls")),
    path("api/", include("api.v1.products.urls")),
    path("api/", include("api.v1.licenses.urls")),
    path("api/", include("api.v1.apikeys.urls")),
]
