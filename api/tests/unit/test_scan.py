"""Unit tests for the SQL ordered scan."""

from unittest.mock import AsyncMock, patch

import asyncpg
import pytest

from blogfeed.db.scan import TableScan
from blogfeed.models.posts import Post
from blogfeed.pagination import ScanParams


def normalize(query: str) -> str:
    return " ".join(query.split())


class TestBuildQuery:
    """Test SQL generation."""
    
    @pytest.fixture
    def scan(self):
        return TableScan("posts", ("id", "title", "content", "author_id"), Post)
    
    def test_offset_query(self, scan):
        query, args = scan.build_query(ScanParams(anchor=None, skip=3, limit=4))
        assert normalize(query) == (
            "SELECT id, title, content, author_id FROM posts "
            "ORDER BY id ASC OFFSET $1 LIMIT $2"
        )
        assert args == [3, 4]
    
    def test_unlimited_query_binds_null_limit(self, scan):
        _, args = scan.build_query(ScanParams(anchor=None, skip=0, limit=None))
        assert args == [0, None]
    
    def test_cursor_query(self, scan):
        query, args = scan.build_query(ScanParams(anchor=6, skip=1, limit=4))
        assert normalize(query) == (
            "SELECT id, title, content, author_id FROM posts "
            "WHERE id >= $1 AND EXISTS (SELECT 1 FROM posts WHERE id = $1) "
            "ORDER BY id ASC OFFSET $2 LIMIT $3"
        )
        assert args == [6, 1, 4]
    
    def test_zero_anchor_is_cursor_mode(self, scan):
        query, args = scan.build_query(ScanParams(anchor=0, skip=0, limit=None))
        assert "EXISTS" in query
        assert args == [0, 0, None]


class TestScan:
    """Test scan execution against a mocked pool."""
    
    @pytest.fixture
    def scan(self):
        return TableScan("posts", ("id", "title", "content", "author_id"), Post)
    
    @pytest.mark.asyncio
    async def test_rows_become_models(self, scan, mock_db_pool):
        pool, conn = mock_db_pool
        conn.fetch.return_value = [
            {"id": 9, "title": "First post by Bob", "content": "This is my first post!", "author_id": 2},
            {"id": 14, "title": "Update from Bob", "content": None, "author_id": 2},
        ]
        
        with patch("blogfeed.db.scan.get_db_pool", AsyncMock(return_value=pool)):
            result = await scan.scan(ScanParams(anchor=6, skip=1, limit=3))
        
        assert [post.id for post in result] == [9, 14]
        assert all(isinstance(post, Post) for post in result)
        assert result[1].content is None
        
        args = conn.fetch.call_args.args
        assert args[1:] == (6, 1, 3)
    
    @pytest.mark.asyncio
    async def test_database_error_propagates(self, scan, mock_db_pool):
        pool, conn = mock_db_pool
        conn.fetch.side_effect = asyncpg.PostgresError("connection lost")
        
        with patch("blogfeed.db.scan.get_db_pool", AsyncMock(return_value=pool)):
            with pytest.raises(asyncpg.PostgresError):
                await scan.scan(ScanParams(anchor=None, skip=0, limit=3))
        
        assert conn.fetch.call_count == 1
