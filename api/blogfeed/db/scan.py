"""Ordered scans over id-ordered tables.

A scan is a single SELECT, so PostgreSQL evaluates the anchor lookup and the
page slice against one snapshot. Consecutive scans share no snapshot.
"""

import logging
from typing import Generic, List, Sequence, Tuple, Any, Type, TypeVar

import asyncpg
from pydantic import BaseModel

from ..pagination import ScanParams
from .connection import get_db_pool


logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class TableScan(Generic[ModelT]):
    """Ascending-id scan of one table, returning rows as pydantic models."""
    
    def __init__(self, table: str, columns: Sequence[str], model: Type[ModelT]):
        self.table = table
        self.columns = tuple(columns)
        self.model = model
    
    def build_query(self, params: ScanParams) -> Tuple[str, List[Any]]:
        """Build the SELECT statement and its arguments for a scan.
        
        Without an anchor the scan starts at the first row. With an anchor it
        starts at the row whose id equals the anchor and yields nothing when
        that row does not exist. A NULL limit means no limit.
        """
        select = f"SELECT {', '.join(self.columns)} FROM {self.table}"
        
        if params.anchor is None:
            query = f"""
                {select}
                ORDER BY id ASC
                OFFSET $1 LIMIT $2
            """
            return query, [params.skip, params.limit]
        
        query = f"""
            {select}
            WHERE id >= $1
              AND EXISTS (SELECT 1 FROM {self.table} WHERE id = $1)
            ORDER BY id ASC
            OFFSET $2 LIMIT $3
        """
        return query, [params.anchor, params.skip, params.limit]
    
    async def scan(self, params: ScanParams) -> List[ModelT]:
        """Run the scan.
        
        Raises:
            asyncpg.PostgresError: Propagated unchanged; scans are not retried
        """
        query, args = self.build_query(params)
        pool = await get_db_pool()
        
        try:
            async with pool.acquire() as conn:
                rows = await conn.fetch(query, *args)
        except asyncpg.PostgresError as e:
            logger.error(f"Database error scanning {self.table}: {e}")
            raise
        
        logger.debug(f"Scanned {len(rows)} rows from {self.table} with {params}")
        return [self.model.model_validate(dict(row)) for row in rows]
