"""Database access for Blog Feed API."""

from .connection import db_manager, get_db_pool
from .scan import TableScan
from .users import user_scan, get_user, get_user_paginator, load_users_by_ids
from .posts import (
    post_scan, get_post, get_post_author, get_post_paginator,
    list_user_posts, attach_authors
)

__all__ = [
    "db_manager",
    "get_db_pool",
    "TableScan",
    "user_scan",
    "get_user",
    "get_user_paginator",
    "load_users_by_ids",
    "post_scan",
    "get_post",
    "get_post_author",
    "get_post_paginator",
    "list_user_posts",
    "attach_authors"
]
