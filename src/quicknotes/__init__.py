"""
Quick Notes - user-owned text notes behind a mock bearer token

A small HTTP service with CRUD operations over notes, an in-memory token
store for authentication, and ownership checks for every mutation.

Version: 1.0.0
"""

__version__ = "1.0.0"
