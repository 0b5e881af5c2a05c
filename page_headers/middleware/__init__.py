"""Middleware package."""
from page_headers.middleware.origin import PaginationHeadersMiddleware, RequestOrigin

__all__ = ["PaginationHeadersMiddleware", "RequestOrigin"]
