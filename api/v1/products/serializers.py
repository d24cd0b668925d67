"""
Serializers for Product API endpoints.
"""

from rest_framework import serializers


class ProductSerializer(serializers.Serializer):
    """Serializer for Product entities."""

    id = serializers.CharField()
    name = serializers.CharField()
    description = serializers.CharField()
    price = serializers.IntegerField()
    createdAt = serializers.IntegerField(source="created_at")


class CreateProductRequestSerializer(serializers.Serializer):
    """Serializer for create product request."""

    name = serializers.CharField(required=True, max_length=255)
    description = serializers.CharField(required=True, allow_blank=True)
    price = serializers.IntegerField(required=True, min_value=0)
