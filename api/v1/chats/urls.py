"""
URL configuration for chat API endpoints.
"""

from django.urls import path

from api.v1.chats import views

app_name = "chats"

urlpatterns = [
    path("chats", views.ChatListCreateView.as_view(), name="list-create"),
    path("chats/deleteMany", views.ChatDeleteManyView.as_view(), name="delete-many"),
    path("chats/<str:chat_id>/messages", views.ChatMessagesView.as_view(), name="messages"),
    path("chats/<str:record_id>", views.ChatRecordView.as_view(), name="detail"),
]
