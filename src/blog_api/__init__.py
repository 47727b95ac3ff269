"""
Blog API Client

Async accessors for a JSONPlaceholder-style REST API exposing
posts, comments and users.
"""

from .http import HttpClient, RequestError
from .models import Comment, CommentUpdate, NewUser, Post, PostUpdate, User

__version__ = "0.1.0"

__all__ = [
    "HttpClient",
    "RequestError",
    "Post",
    "PostUpdate",
    "Comment",
    "CommentUpdate",
    "User",
    "NewUser",
]
