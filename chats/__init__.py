"""
Chats module - chat boards and their append-only message logs.
"""
