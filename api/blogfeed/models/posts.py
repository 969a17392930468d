"""Pydantic models for posts."""

from typing import Optional

from pydantic import BaseModel, Field, ConfigDict

from ..pagination import Page
from .users import User


class Post(BaseModel):
    """A post record."""
    
    id: int = Field(description="Post id, assigned by the database and never reused")
    title: str = Field(description="Post title")
    content: Optional[str] = Field(default=None, description="Post body")
    author_id: Optional[int] = Field(default=None, description="Id of the authoring user")
    author: Optional[User] = Field(
        default=None,
        description="Authoring user, only present when requested with include_author"
    )
    
    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 9,
                "title": "First post by Bob",
                "content": "This is my first post!",
                "author_id": 2,
                "author": None
            }
        }
    )


class PostPage(Page[Post]):
    """Response model for a page of posts."""
    
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "items": [
                    {"id": 2, "title": "First post by Alice", "content": "Hello world!", "author_id": 1},
                    {"id": 5, "title": "Update from Alice", "content": "Some recent news", "author_id": 1},
                    {"id": 6, "title": "Another post by Alice", "content": "Another update", "author_id": 1}
                ],
                "next_cursor": 6,
                "has_more": True
            }
        }
    )
