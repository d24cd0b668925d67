"""
URL configuration for user API endpoints.
"""

from django.urls import path

from api.v1.users import views

app_name = "users"

urlpatterns = [
    path("users", views.UserListCreateView.as_view(), name="list-create"),
    path("users/deleteMany", views.UserDeleteManyView.as_view(), name="delete-many"),
    path("users/<str:record_id>", views.UserRecordView.as_view(), name="detail"),
]
