"""Seed the database with the sample users and posts.

Run with ``python -m blogfeed.db.seed``. Seeding is idempotent: users are
matched by email and posts by id, so re-running leaves existing rows alone.
"""

import asyncio
import logging
from typing import Any, Dict, List

from asyncpg import Pool

from .connection import db_manager, get_db_pool


logger = logging.getLogger(__name__)

SEED_USERS: List[Dict[str, Any]] = [
    {
        "email": "alice@prisma.io",
        "name": "Alice",
        "posts": [
            {"id": 2, "title": "First post by Alice", "content": "Hello world!"},
            {"id": 5, "title": "Update from Alice", "content": "Some recent news"},
            {"id": 6, "title": "Another post by Alice", "content": "Another update"},
        ],
    },
    {
        "email": "bob@prisma.io",
        "name": "Bob",
        "posts": [
            {"id": 9, "title": "First post by Bob", "content": "This is my first post!"},
            {"id": 14, "title": "Update from Bob", "content": "What I've been working on"},
        ],
    },
    {
        "email": "charlie@prisma.io",
        "name": "Charlie",
        "posts": [
            {"id": 16, "title": "First post by Charlie", "content": "Hi everyone!"},
            {"id": 17, "title": "Update from Charlie", "content": "Lots of news"},
        ],
    },
]


async def seed_database(pool: Pool) -> Dict[str, int]:
    """Insert the sample users and their posts.
    
    Returns:
        Mapping of seeded email to user id
    """
    user_ids = {}
    
    async with pool.acquire() as conn:
        async with conn.transaction():
            for user in SEED_USERS:
                user_id = await conn.fetchval(
                    """
                    INSERT INTO users (email, name)
                    VALUES ($1, $2)
                    ON CONFLICT (email) DO UPDATE SET email = EXCLUDED.email
                    RETURNING id
                    """,
                    user["email"],
                    user["name"]
                )
                user_ids[user["email"]] = user_id
                
                for post in user["posts"]:
                    await conn.execute(
                        """
                        INSERT INTO posts (id, title, content, author_id)
                        VALUES ($1, $2, $3, $4)
                        ON CONFLICT (id) DO NOTHING
                        """,
                        post["id"],
                        post["title"],
                        post["content"],
                        user_id
                    )
            
            # Explicit ids bypass the sequence; move it past them
            await conn.execute(
                "SELECT setval(pg_get_serial_sequence('posts', 'id'), "
                "(SELECT COALESCE(MAX(id), 1) FROM posts))"
            )
    
    logger.info(f"Seeded {len(user_ids)} users: {user_ids}")
    return user_ids


async def main() -> None:
    try:
        pool = await get_db_pool()
        await seed_database(pool)
    finally:
        await db_manager.close()


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    asyncio.run(main())
