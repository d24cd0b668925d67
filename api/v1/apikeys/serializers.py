"""
Serializers for API key endpoints.
"""

from rest_framework import serializers


class ApiKeySerializer(serializers.Serializer):
    """Serializer for ApiKey entities."""

    id = serializers.CharField()
    key = serializers.CharField()
    createdAt = serializers.IntegerField(source="created_at")
