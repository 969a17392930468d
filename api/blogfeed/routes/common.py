"""Shared helpers for paginated endpoints."""

import logging
from typing import Annotated, Optional

from fastapi import Path, Query, Request, Response

from ..config import get_settings
from ..pagination import (
    Page, PageDescriptor, next_page_descriptor,
    descriptor_params, create_link_header,
    MIN_RECORD_ID, MAX_RECORD_ID, MAX_SKIP
)
from ..errors.problem_details import BadRequestError


logger = logging.getLogger(__name__)

SkipQuery = Annotated[Optional[int], Query(ge=0, le=MAX_SKIP, description="Number of records to bypass")]
TakeQuery = Annotated[Optional[int], Query(ge=0, description="Maximum number of records to return")]
CursorQuery = Annotated[
    Optional[int],
    Query(ge=MIN_RECORD_ID, le=MAX_RECORD_ID, description="Id of the record that anchors the page")
]
RequiredCursorQuery = Annotated[
    int,
    Query(ge=MIN_RECORD_ID, le=MAX_RECORD_ID, description="Id of the record that anchors the page")
]
RecordIdPath = Annotated[int, Path(ge=MIN_RECORD_ID, le=MAX_RECORD_ID, description="Record id")]


def build_descriptor(
    skip: Optional[int] = None,
    take: Optional[int] = None,
    cursor: Optional[int] = None
) -> PageDescriptor:
    """Build a page descriptor from query parameters.
    
    An omitted ``take`` falls back to the configured default page size,
    which is unset (no limit) unless configured.
    
    Raises:
        BadRequestError: If ``take`` exceeds the configured maximum
    """
    settings = get_settings()
    
    if take is None:
        take = settings.default_page_size
    elif take > settings.max_page_size:
        raise BadRequestError(
            f"take must be at most {settings.max_page_size}",
            max_page_size=settings.max_page_size
        )
    
    return PageDescriptor(skip=skip, take=take, cursor=cursor)


def add_next_link(
    request: Request,
    response: Response,
    descriptor: PageDescriptor,
    page: Page
) -> None:
    """Add a Link header (RFC 8288) pointing at the next page, if any."""
    next_descriptor = next_page_descriptor(descriptor, page)
    if next_descriptor is None:
        return
    
    base_url = str(request.url).split('?')[0]
    carried = {
        key: value for key, value in request.query_params.items()
        if key not in ("skip", "take", "cursor")
    }
    
    link_header = create_link_header(
        base_url=base_url,
        params=carried,
        next_params=descriptor_params(next_descriptor)
    )
    if link_header:
        response.headers["Link"] = link_header
