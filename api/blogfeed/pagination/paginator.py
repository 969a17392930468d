"""Offset and cursor pagination over an id-ordered record set.

Records are always ordered ascending by their integer ``id``. A page request
(``PageDescriptor``) is translated into the ordered-scan parameters
(``ScanParams``) understood by a storage adapter, and the rows that come back
are packaged into a ``Page`` together with the cursor for the next request.

Offset mode positions the page by ordinal rank in the full set, so inserts or
deletes between two calls shift the window. Cursor mode anchors the page to
the record whose id equals ``cursor``: that record is position 0, ``skip=1``
starts right after it, and mutations before the anchor never move the window.
"""

import logging
from dataclasses import dataclass
from typing import Generic, List, Optional, Protocol, TypeVar

from pydantic import BaseModel, ConfigDict, Field


logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT")

# Ids are INTEGER columns; OFFSET and LIMIT are BIGINT
MIN_RECORD_ID = -(2**31)
MAX_RECORD_ID = 2**31 - 1
MAX_SKIP = 2**63 - 1
# take + 1 is sent as LIMIT
MAX_TAKE = 2**63 - 2


class PageDescriptor(BaseModel):
    """A single page request."""
    
    skip: Optional[int] = Field(
        default=None,
        ge=0,
        le=MAX_SKIP,
        description="Records to bypass; counted from the cursor record when a cursor is given"
    )
    take: Optional[int] = Field(
        default=None,
        ge=0,
        le=MAX_TAKE,
        description="Maximum number of records to return; omitted means no limit"
    )
    cursor: Optional[int] = Field(
        default=None,
        ge=MIN_RECORD_ID,
        le=MAX_RECORD_ID,
        description="Id of the record that anchors the page; omitted selects offset mode"
    )
    
    model_config = ConfigDict(frozen=True)
    
    @property
    def is_cursor_mode(self) -> bool:
        return self.cursor is not None


@dataclass(frozen=True)
class ScanParams:
    """Concrete ordered-scan request issued to a storage adapter.
    
    ``anchor`` is the id the scan starts at (inclusive), ``skip`` the number of
    records bypassed from there and ``limit`` the row cap (None for no cap).
    """
    
    anchor: Optional[int]
    skip: int
    limit: Optional[int]


class Page(BaseModel, Generic[RecordT]):
    """Records of one page plus what is needed to request the next one."""
    
    items: List[RecordT] = Field(description="Records in ascending id order")
    next_cursor: Optional[int] = Field(default=None, description="Id of the last record on this page")
    has_more: bool = Field(default=False, description="Whether records exist beyond this page")


class OrderedScan(Protocol[RecordT]):
    """Storage primitive returning an ascending-id slice of one record set."""
    
    async def scan(self, params: ScanParams) -> List[RecordT]:
        ...


def build_page(records: List[RecordT], take: Optional[int]) -> Page[RecordT]:
    """Trim scanned records to ``take`` and derive the continuation data.
    
    The scan is expected to return one record more than ``take`` when more
    records exist past the page. A page with ``take=0`` never reports more
    records, since it offers no position to continue from.
    """
    if take is None or take == 0:
        items = list(records[:take])
        has_more = False
    else:
        has_more = len(records) > take
        items = list(records[:take])
    
    next_cursor = items[-1].id if items else None
    return Page(items=items, next_cursor=next_cursor, has_more=has_more)


class Paginator(Generic[RecordT]):
    """Translates page descriptors into ordered scans over one record set.
    
    Holds no per-request state, so one instance can serve concurrent callers.
    """
    
    def __init__(self, scan: OrderedScan[RecordT]):
        self._scan = scan
    
    def plan(self, descriptor: PageDescriptor) -> ScanParams:
        """Compute the scan parameters for a page descriptor."""
        skip = descriptor.skip if descriptor.skip is not None else 0
        take = descriptor.take
        if take is None or take == 0:
            limit = take
        else:
            # One look-ahead row tells whether another page exists
            limit = take + 1
        return ScanParams(anchor=descriptor.cursor, skip=skip, limit=limit)
    
    async def fetch_page(self, descriptor: PageDescriptor) -> Page[RecordT]:
        """Fetch the page described by ``descriptor``.
        
        Args:
            descriptor: skip/take/cursor of the requested page
            
        Returns:
            The page; empty when the position is past the end of the set or
            the cursor id does not exist
            
        Raises:
            Whatever the storage adapter raises, unchanged
        """
        params = self.plan(descriptor)
        logger.debug(f"Scanning with {params} for {descriptor}")
        
        records = await self._scan.scan(params)
        return build_page(records, descriptor.take)
    
    async def offset_pagination(
        self,
        skip: Optional[int] = None,
        take: Optional[int] = None
    ) -> Page[RecordT]:
        """Fetch a page positioned by ordinal rank."""
        return await self.fetch_page(PageDescriptor(skip=skip, take=take))
    
    async def cursor_pagination(
        self,
        cursor: int,
        skip: Optional[int] = None,
        take: Optional[int] = None
    ) -> Page[RecordT]:
        """Fetch a page anchored at the record whose id is ``cursor``."""
        return await self.fetch_page(PageDescriptor(skip=skip, take=take, cursor=cursor))
