"""
URL configuration for API key endpoints.
"""

from django.urls import path

from api.v1.apikeys import views

app_name = "apikeys"

urlpatterns = [
    path("api-keys", views.ApiKeyListCreateView.as_view(), name="list-create"),
]
