"""
URL configuration for license API endpoints.
"""

from django.urls import path

from api.v1.licenses import views

app_name = "licenses"

urlpatterns = [
    path("licenses", views.LicenseListCreateView.as_view(), name="list-create"),
    path("licenses/deleteMany", views.LicenseDeleteManyView.as_view(), name="delete-many"),
    path("licenses/<str:record_id>/revoke", views.RevokeLicenseView.as_view(), name="revoke"),
    path("licenses/<str:record_id>", views.LicenseRecordView.as_view(), name="detail"),
]
