"""
Serializers for License API endpoints.
"""

from rest_framework import serializers


class LicenseSerializer(serializers.Serializer):
    """
    Serializer for License entities.

    The status is the effective status: an active license past its
    expiry time is rendered as expired.
    """

    id = serializers.CharField()
    productId = serializers.CharField(source="product_id")
    key = serializers.CharField()
    status = serializers.SerializerMethodField()
    expiresAt = serializers.IntegerField(source="expires_at", allow_null=True)
    metadata = serializers.DictField()
    createdAt = serializers.IntegerField(source="created_at")

    def get_status(self, obj) -> str:
        return obj.effective_status().value


class CreateLicenseRequestSerializer(serializers.Serializer):
    """Serializer for create license request."""

    productId = serializers.CharField(source="product_id", required=True, max_length=255)
    expiresAt = serializers.IntegerField(
        source="expires_at", required=False, allow_null=True, default=None
    )
    metadata = serializers.DictField(required=False, default=dict)
