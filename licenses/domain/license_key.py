"""
License key generation.

Keys are displayed as `SK-` followed by 32 uppercase hex characters
(128 random bits), which keeps collisions out of practical reach.
"""

import re
import secrets

LICENSE_KEY_PREFIX = "SK"
LICENSE_KEY_PATTERN = re.compile(r"^SK-[0-9A-F]{32}$")


def generate_license_key() -> str:
    """
    Generate a license key in format: SK-XXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXX.

    Returns:
        Generated license key string
    """
    return f"{LICENSE_KEY_PREFIX}-{secrets.token_hex(16).upper()}"


def is_well_formed_key(key: str) -> bool:
    """Check a key against the display format."""
    return bool(LICENSE_KEY_PATTERN.match(key or ""))
