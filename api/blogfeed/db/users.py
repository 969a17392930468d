"""Database operations for users."""

import logging
from typing import Dict, Iterable

import asyncpg

from ..models.users import User
from ..pagination import Paginator
from ..errors.problem_details import NotFoundError
from .connection import get_db_pool
from .scan import TableScan


logger = logging.getLogger(__name__)

USER_COLUMNS = ("id", "name", "email")

user_scan = TableScan("users", USER_COLUMNS, User)


def get_user_paginator() -> Paginator[User]:
    """Paginator over all users."""
    return Paginator(user_scan)


async def get_user(user_id: int) -> User:
    """Get a user by id.
    
    Raises:
        NotFoundError: If no user has this id
    """
    pool = await get_db_pool()
    
    try:
        async with pool.acquire() as conn:
            row = await conn.fetchrow(
                f"SELECT {', '.join(USER_COLUMNS)} FROM users WHERE id = $1",
                user_id
            )
    except asyncpg.PostgresError as e:
        logger.error(f"Database error retrieving user {user_id}: {e}")
        raise
    
    if not row:
        raise NotFoundError(f"User '{user_id}' not found")
    
    return User.model_validate(dict(row))


async def load_users_by_ids(user_ids: Iterable[int]) -> Dict[int, User]:
    """Fetch several users in one round-trip, keyed by id.
    
    Ids without a matching user are absent from the result.
    """
    ids = sorted(set(user_ids))
    if not ids:
        return {}
    
    pool = await get_db_pool()
    
    try:
        async with pool.acquire() as conn:
            rows = await conn.fetch(
                f"SELECT {', '.join(USER_COLUMNS)} FROM users WHERE id = ANY($1::int[])",
                ids
            )
    except asyncpg.PostgresError as e:
        logger.error(f"Database error loading users {ids}: {e}")
        raise
    
    logger.debug(f"Loaded {len(rows)} of {len(ids)} requested users")
    return {row["id"]: User.model_validate(dict(row)) for row in rows}
