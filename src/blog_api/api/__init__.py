"""
API Module

Async accessors for the posts, comments and users resources.
"""

from . import comments, posts, users

__all__ = ["comments", "posts", "users"]
