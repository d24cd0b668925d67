"""
Starter licenses for an empty licenses collection.

Ten licenses spread over the seeded products, cycling through
active, expired and banned.
"""
from typing import List

from core.application.seeding import SeedPolicy
from core.domain.value_objects import DAY_MS, LicenseStatus, now_ms
from licenses.domain.license import License
from licenses.domain.license_key import generate_license_key
from products.application.seeding import SEED_PRODUCTS

SEED_LICENSE_COUNT = 10
STATUS_CYCLE = (LicenseStatus.ACTIVE, LicenseStatus.EXPIRED, LicenseStatus.BANNED)


class LicenseSeedPolicy(SeedPolicy[License]):
    """Seeds a deterministic status distribution across the seed products."""

    collection = "licenses"

    def build(self) -> List[License]:
        now = now_ms()
        licenses = []
        for i in range(SEED_LICENSE_COUNT):
            status = STATUS_CYCLE[i % len(STATUS_CYCLE)]
            if status == LicenseStatus.ACTIVE:
                expires_at = now + DAY_MS * 30 * (i + 1)
            elif status == LicenseStatus.EXPIRED:
                expires_at = now - DAY_MS * 30
            else:
                expires_at = None

            licenses.append(
                License(
                    id=f"lic_seed_{i + 1}",
                    product_id=SEED_PRODUCTS[i % len(SEED_PRODUCTS)][0],
                    key=generate_license_key(),
                    status=status,
                    expires_at=expires_at,
                    metadata={"customerId": f"cust_{i + 1}"},
                    created_at=now - DAY_MS * i,
                )
            )
        return licenses
