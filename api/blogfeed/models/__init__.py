"""Data models for Blog Feed API."""

from .users import User, UserPage
from .posts import Post, PostPage

__all__ = [
    "User",
    "UserPage",
    "Post",
    "PostPage"
]
