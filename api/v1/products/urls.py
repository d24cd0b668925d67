"""
URL configuration for product API endpoints.
"""

from django.urls import path

from api.v1.products import views

app_name = "products"

urlpatterns = [
    path("products", views.ProductListCreateView.as_view(), name="list-create"),
    path("products/deleteMany", views.ProductDeleteManyView.as_view(), name="delete-many"),
    path("products/<str:record_id>", views.ProductRecordView.as_view(), name="detail"),
]
