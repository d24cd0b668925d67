"""
CreateLicenseCommand.

Command to issue a new license for a product.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class CreateLicenseCommand:
    """Command to create a license."""

    product_id: str
    expires_at: Optional[int] = None
    metadata: Dict[str, Any] = field(default_factory=dict)
