"""
SeverKey service Django project.
"""
