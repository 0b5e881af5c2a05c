"""RFC 5988 pagination headers for Flask APIs."""
from page_headers.core import setup_logging
from page_headers.extension import PageHeaders, get_current_page, paginate, set_current_page
from page_headers.links import (
    LINK_HEADER,
    PER_PAGE_HEADER,
    TOTAL_HEADER,
    attach_pagination_headers,
    build_links,
    pagination_headers,
)
from page_headers.middleware import RequestOrigin
from page_headers.utils import Page, PageHeadersError, PaginationError, as_page
from page_headers.utils.decorators import paginated

__version__ = "1.0.0"

__all__ = [
    "LINK_HEADER",
    "TOTAL_HEADER",
    "PER_PAGE_HEADER",
    "Page",
    "PageHeaders",
    "PageHeadersError",
    "PaginationError",
    "RequestOrigin",
    "as_page",
    "attach_pagination_headers",
    "build_links",
    "get_current_page",
    "paginate",
    "paginated",
    "pagination_headers",
    "set_current_page",
    "setup_logging",
]
