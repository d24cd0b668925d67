"""
API keys module - programmatic access keys listed on the settings page.

The collection is process-wide: it starts empty at process start,
is seeded with one key on first read and only changes through its store.
"""
