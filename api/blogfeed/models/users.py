"""Pydantic models for users."""

from typing import Optional

from pydantic import BaseModel, Field, ConfigDict

from ..pagination import Page


class User(BaseModel):
    """A user record."""
    
    id: int = Field(description="User id, assigned by the database and never reused")
    name: Optional[str] = Field(default=None, description="Display name")
    email: str = Field(description="Unique email address")
    
    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "Alice",
                "email": "alice@prisma.io"
            }
        }
    )


class UserPage(Page[User]):
    """Response model for a page of users."""
    
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "items": [
                    {"id": 1, "name": "Alice", "email": "alice@prisma.io"},
                    {"id": 2, "name": "Bob", "email": "bob@prisma.io"}
                ],
                "next_cursor": 2,
                "has_more": True
            }
        }
    )
