"""Users API endpoints."""

import logging
from typing import Annotated, List

from fastapi import APIRouter, Depends, Request, Response

from ..models.posts import Post
from ..models.users import User, UserPage
from ..pagination import Paginator
from ..db.users import get_user, get_user_paginator
from ..db.posts import list_user_posts
from .common import (
    build_descriptor, add_next_link,
    SkipQuery, TakeQuery, CursorQuery, RecordIdPath
)


logger = logging.getLogger(__name__)

users_router = APIRouter(
    prefix="/users",
    tags=["Users"],
    responses={
        404: {"description": "Not Found"}
    }
)


@users_router.get(
    "",
    response_model=UserPage,
    summary="List users",
    description="List users ascending by id with offset or cursor pagination."
)
async def list_users(
    request: Request,
    response: Response,
    paginator: Annotated[Paginator[User], Depends(get_user_paginator)],
    skip: SkipQuery = None,
    take: TakeQuery = None,
    cursor: CursorQuery = None
) -> UserPage:
    descriptor = build_descriptor(skip, take, cursor)
    page = await paginator.fetch_page(descriptor)
    add_next_link(request, response, descriptor, page)
    
    logger.info(f"Returned {len(page.items)} users for {descriptor}")
    return UserPage.model_validate(page.model_dump())


@users_router.get(
    "/{user_id}",
    response_model=User,
    summary="Get a user"
)
async def get_user_by_id(user_id: RecordIdPath) -> User:
    return await get_user(user_id)


@users_router.get(
    "/{user_id}/posts",
    response_model=List[Post],
    summary="List a user's posts",
    description="All posts written by the user, ascending by id."
)
async def get_posts_of_user(user_id: RecordIdPath) -> List[Post]:
    return await list_user_posts(user_id)
