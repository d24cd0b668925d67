"""
RevokeLicenseCommand.

Command to ban a license.
"""
from dataclasses import dataclass


@dataclass
class RevokeLicenseCommand:
    """Command to revoke a license."""

    license_id: str
