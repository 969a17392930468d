"""Database operations for posts."""

import logging
from typing import List, Optional

import asyncpg

from ..models.posts import Post
from ..models.users import User
from ..pagination import Paginator
from ..errors.problem_details import NotFoundError
from .connection import get_db_pool
from .scan import TableScan
from .users import get_user, load_users_by_ids


logger = logging.getLogger(__name__)

POST_COLUMNS = ("id", "title", "content", "author_id")

post_scan = TableScan("posts", POST_COLUMNS, Post)


def get_post_paginator() -> Paginator[Post]:
    """Paginator over all posts."""
    return Paginator(post_scan)


async def get_post(post_id: int) -> Post:
    """Get a post by id.
    
    Raises:
        NotFoundError: If no post has this id
    """
    pool = await get_db_pool()
    
    try:
        async with pool.acquire() as conn:
            row = await conn.fetchrow(
                f"SELECT {', '.join(POST_COLUMNS)} FROM posts WHERE id = $1",
                post_id
            )
    except asyncpg.PostgresError as e:
        logger.error(f"Database error retrieving post {post_id}: {e}")
        raise
    
    if not row:
        raise NotFoundError(f"Post '{post_id}' not found")
    
    return Post.model_validate(dict(row))


async def get_post_author(post_id: int) -> Optional[User]:
    """Get the author of a post, or None for a post without one.
    
    Raises:
        NotFoundError: If no post has this id
    """
    post = await get_post(post_id)
    if post.author_id is None:
        return None
    return await get_user(post.author_id)


async def list_user_posts(user_id: int) -> List[Post]:
    """List all posts written by a user, ascending by id.
    
    Raises:
        NotFoundError: If no user has this id
    """
    pool = await get_db_pool()
    
    try:
        async with pool.acquire() as conn:
            # Single statement so the existence check and the list agree
            rows = await conn.fetch(
                f"""
                SELECT u.id AS user_id, {', '.join('p.' + c for c in POST_COLUMNS)}
                FROM users u
                LEFT JOIN posts p ON p.author_id = u.id
                WHERE u.id = $1
                ORDER BY p.id ASC
                """,
                user_id
            )
    except asyncpg.PostgresError as e:
        logger.error(f"Database error listing posts for user {user_id}: {e}")
        raise
    
    if not rows:
        raise NotFoundError(f"User '{user_id}' not found")
    
    return [
        Post.model_validate({c: row[c] for c in POST_COLUMNS})
        for row in rows
        if row["id"] is not None
    ]


async def attach_authors(posts: List[Post]) -> List[Post]:
    """Fill in ``author`` on each post with a single batched user lookup."""
    authors = await load_users_by_ids(
        post.author_id for post in posts if post.author_id is not None
    )
    return [
        post.model_copy(update={"author": authors.get(post.author_id)})
        for post in posts
    ]
