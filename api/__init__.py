"""
API module - REST façade over the entity collections.
"""
