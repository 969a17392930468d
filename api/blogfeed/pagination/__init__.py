"""Pagination module for offset and cursor pagination."""

from .paginator import (
    PageDescriptor,
    ScanParams,
    Page,
    OrderedScan,
    Paginator,
    build_page,
    MIN_RECORD_ID,
    MAX_RECORD_ID,
    MAX_SKIP,
    MAX_TAKE
)
from .links import (
    next_page_descriptor,
    descriptor_params,
    create_link_header
)

__all__ = [
    "PageDescriptor",
    "ScanParams",
    "Page",
    "OrderedScan",
    "Paginator",
    "build_page",
    "MIN_RECORD_ID",
    "MAX_RECORD_ID",
    "MAX_SKIP",
    "MAX_TAKE",
    "next_page_descriptor",
    "descriptor_params",
    "create_link_header"
]
