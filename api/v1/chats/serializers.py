"""
Serializers for Chat API endpoints.
"""

from rest_framework import serializers


class ChatSerializer(serializers.Serializer):
    """Serializer for Chat entities (messages are served separately)."""

    id = serializers.CharField()
    title = serializers.CharField()


class CreateChatRequestSerializer(serializers.Serializer):
    """Serializer for create chat request."""

    title = serializers.CharField(required=True, max_length=255)


class ChatMessageSerializer(serializers.Serializer):
    """Serializer for ChatMessage entities."""

    id = serializers.CharField()
    chatId = serializers.CharField(source="chat_id")
    userId = serializers.CharField(source="user_id")
    text = serializers.CharField()
    ts = serializers.IntegerField()


class SendMessageRequestSerializer(serializers.Serializer):
    """Serializer for send message request."""

    userId = serializers.CharField(source="user_id", required=True, max_length=255)
    text = serializers.CharField(required=True, max_length=4000)
