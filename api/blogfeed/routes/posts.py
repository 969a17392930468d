"""Posts API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request, Response

from ..models.posts import Post, PostPage
from ..models.users import User
from ..pagination import Paginator
from ..db.posts import get_post, get_post_author, get_post_paginator, attach_authors
from ..errors.problem_details import NotFoundError
from .common import (
    build_descriptor, add_next_link,
    SkipQuery, TakeQuery, CursorQuery, RequiredCursorQuery, RecordIdPath
)


logger = logging.getLogger(__name__)

posts_router = APIRouter(
    prefix="/posts",
    tags=["Posts"],
    responses={
        404: {"description": "Not Found"}
    }
)

PostPaginator = Annotated[Paginator[Post], Depends(get_post_paginator)]


@posts_router.get(
    "",
    response_model=PostPage,
    summary="List posts",
    description="List posts ascending by id. Offset mode without a cursor, cursor mode with one.",
    responses={
        200: {"description": "Posts retrieved successfully"},
        400: {"description": "Bad Request - take above the maximum page size"}
    }
)
async def list_posts(
    request: Request,
    response: Response,
    paginator: PostPaginator,
    skip: SkipQuery = None,
    take: TakeQuery = None,
    cursor: CursorQuery = None,
    include_author: Annotated[bool, Query(description="Embed each post's author")] = False
) -> PostPage:
    """List posts with either pagination strategy.
    
    A page in cursor mode starts at the post whose id equals ``cursor``; pass
    ``skip=1`` with the previous page's ``next_cursor`` to continue after it.
    """
    descriptor = build_descriptor(skip, take, cursor)
    page = await paginator.fetch_page(descriptor)
    
    items = page.items
    if include_author:
        items = await attach_authors(items)
    
    add_next_link(request, response, descriptor, page)
    
    logger.info(f"Returned {len(items)} posts for {descriptor}")
    return PostPage(items=items, next_cursor=page.next_cursor, has_more=page.has_more)


@posts_router.get(
    "/offset",
    response_model=PostPage,
    summary="Offset pagination",
    description="Page through posts by ordinal position."
)
async def offset_pagination(
    request: Request,
    response: Response,
    paginator: PostPaginator,
    skip: SkipQuery = None,
    take: TakeQuery = None
) -> PostPage:
    """Page through posts by skipping ``skip`` posts from the start.
    
    Positions shift when posts are created or deleted between requests, so
    consecutive pages may repeat or miss posts.
    """
    descriptor = build_descriptor(skip, take)
    page = await paginator.fetch_page(descriptor)
    add_next_link(request, response, descriptor, page)
    return PostPage.model_validate(page.model_dump())


@posts_router.get(
    "/cursor",
    response_model=PostPage,
    summary="Cursor pagination",
    description="Page through posts anchored at a known post id."
)
async def cursor_pagination(
    request: Request,
    response: Response,
    paginator: PostPaginator,
    cursor: RequiredCursorQuery,
    skip: SkipQuery = None,
    take: TakeQuery = None
) -> PostPage:
    """Page through posts starting at the post with id ``cursor``.
    
    An unknown cursor yields an empty page.
    """
    descriptor = build_descriptor(skip, take, cursor)
    page = await paginator.fetch_page(descriptor)
    add_next_link(request, response, descriptor, page)
    return PostPage.model_validate(page.model_dump())


@posts_router.get(
    "/{post_id}",
    response_model=Post,
    summary="Get a post"
)
async def get_post_by_id(post_id: RecordIdPath) -> Post:
    """Get a single post by id."""
    return await get_post(post_id)


@posts_router.get(
    "/{post_id}/author",
    response_model=User,
    summary="Get a post's author"
)
async def get_author_of_post(post_id: RecordIdPath) -> User:
    """Get the user who wrote a post."""
    author = await get_post_author(post_id)
    if author is None:
        raise NotFoundError(f"Post '{post_id}' has no author")
    return author
