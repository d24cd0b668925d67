"""
Serializers for User API endpoints.
"""

from rest_framework import serializers


class UserSerializer(serializers.Serializer):
    """Serializer for User entities."""

    id = serializers.CharField()
    name = serializers.CharField()


class CreateUserRequestSerializer(serializers.Serializer):
    """Serializer for create user request."""

    name = serializers.CharField(required=True, max_length=255)
