"""
Licenses module - product licenses and license keys.

This module handles:
- License entity and its status rules
- License key generation
- License issuing and revocation
"""
