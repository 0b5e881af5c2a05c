"""Utility package."""
from page_headers.utils.errors import PageHeadersError, PaginationError, register_error_handlers
from page_headers.utils.pagination import Page, as_page

__all__ = [
    "Page",
    "as_page",
    "PageHeadersError",
    "PaginationError",
    "register_error_handlers",
]
