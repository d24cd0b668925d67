"""
License domain entity.

This is the core domain entity representing a license.
It contains business logic and is independent of infrastructure.

Status rules:
- A license is created ACTIVE.
- revoke() moves it to BANNED, the terminal denied state.
- EXPIRED is never written by revoke(); an ACTIVE license whose
  expiry time has passed reads as EXPIRED (see effective_status).
"""
import uuid
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional

from core.domain.entity import Entity
from core.domain.value_objects import LicenseStatus, now_ms
from licenses.domain.license_key import generate_license_key


@dataclass(frozen=True)
class License(Entity):
    """
    License domain entity.

    Represents a license key granting access to a product.
    This is an immutable value object with business logic.
    """

    product_id: str
    key: str
    status: LicenseStatus
    expires_at: Optional[int]
    metadata: Dict[str, Any] = field(default_factory=dict)
    created_at: int = 0

    def __post_init__(self):
        """Validate license entity."""
        super().__post_init__()
        if not isinstance(self.product_id, str) or not self.product_id:
            raise ValueError("Product ID is required")
        if not isinstance(self.key, str) or not self.key:
            raise ValueError("License key cannot be empty")
        if not isinstance(self.status, LicenseStatus):
            raise ValueError(f"Invalid license status: {self.status!r}")
        if self.expires_at is not None and (
            isinstance(self.expires_at, bool) or not isinstance(self.expires_at, int)
        ):
            raise ValueError("Expiration must be epoch milliseconds or None")
        if not isinstance(self.metadata, dict):
            raise ValueError("Metadata must be a mapping")

    @classmethod
    def create(
        cls,
        product_id: str,
        expires_at: Optional[int] = None,
        metadata: Optional[Dict[str, Any]] = None,
        license_id: Optional[str] = None,
        key: Optional[str] = None,
    ) -> "License":
        """
        Create a new active License entity.

        Args:
            product_id: Product the license is for (not checked for existence)
            expires_at: Optional expiration in epoch ms (None never expires)
            metadata: Optional free-form metadata
            license_id: Optional id (generated if not provided)
            key: Optional license key (generated if not provided)

        Returns:
            License entity instance
        """
        return cls(
            id=license_id or f"lic_{uuid.uuid4()}",
            product_id=product_id,
            key=key or generate_license_key(),
            status=LicenseStatus.ACTIVE,
            expires_at=expires_at,
            metadata=dict(metadata or {}),
            created_at=now_ms(),
        )

    def is_expired(self, current_time: Optional[int] = None) -> bool:
        """
        Check if the expiry time has passed.

        Args:
            current_time: Current time in epoch ms (defaults to now)
        """
        if self.expires_at is None:
            return False
        check_time = current_time if current_time is not None else now_ms()
        return self.expires_at <= check_time

    def effective_status(self, current_time: Optional[int] = None) -> LicenseStatus:
        """
        Status as seen by readers.

        The stored status, except that an ACTIVE license past its
        expiry time reads as EXPIRED.
        """
        if self.status == LicenseStatus.ACTIVE and self.is_expired(current_time):
            return LicenseStatus.EXPIRED
        return self.status

    def is_valid(self, current_time: Optional[int] = None) -> bool:
        """Check if the license currently grants access."""
        return self.effective_status(current_time) == LicenseStatus.ACTIVE

    def revoke(self) -> "License":
        """
        Ban the license.

        Revoking an already banned license returns it unchanged.

        Returns:
            License instance with banned status
        """
        if self.status == LicenseStatus.BANNED:
            return self
        return replace(self, status=LicenseStatus.BANNED)
