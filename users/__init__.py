"""
Users module - admin user accounts shown in the dashboard.
"""
