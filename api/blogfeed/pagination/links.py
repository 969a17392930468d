"""Continuation helpers: next-page descriptors and RFC 8288 Link headers."""

from typing import Optional, Dict, Any
from urllib.parse import urlencode

from .paginator import Page, PageDescriptor


def next_page_descriptor(descriptor: PageDescriptor, page: Page) -> Optional[PageDescriptor]:
    """Build the descriptor that requests the page following ``page``.
    
    Offset mode advances ``skip`` by ``take``. Cursor mode re-anchors on the
    last record returned and skips that record itself.
    
    Args:
        descriptor: Descriptor that produced ``page``
        page: The page just returned
        
    Returns:
        Descriptor for the next page, or None if ``page`` was the last one
    """
    if not page.has_more or page.next_cursor is None:
        return None
    
    if descriptor.is_cursor_mode:
        return PageDescriptor(skip=1, take=descriptor.take, cursor=page.next_cursor)
    
    skip = descriptor.skip if descriptor.skip is not None else 0
    return PageDescriptor(skip=skip + len(page.items), take=descriptor.take)


def descriptor_params(descriptor: PageDescriptor) -> Dict[str, Any]:
    """Render a descriptor as query parameters, leaving out absent fields."""
    return descriptor.model_dump(exclude_none=True)


def create_link_header(
    base_url: str,
    params: Dict[str, Any],
    next_params: Optional[Dict[str, Any]] = None
) -> Optional[str]:
    """Create Link header for pagination as per RFC 8288.
    
    Args:
        base_url: Base URL for the resource
        params: Query parameters to carry over unchanged
        next_params: Pagination parameters of the next page
        
    Returns:
        Link header value or None if there is no next page
    """
    if next_params is None:
        return None
    
    query = {**params, **next_params}
    next_url = f"{base_url}?{urlencode(query)}"
    return f'<{next_url}>; rel="next"'
