"""API routers for Blog Feed API."""

from .posts import posts_router
from .users import users_router

__all__ = [
    "posts_router",
    "users_router"
]
