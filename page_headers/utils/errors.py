"""Custom error classes and error handling utilities."""
from typing import Any, Dict, Optional

from flask import jsonify
from loguru import logger


class PageHeadersError(Exception):
    """Base class for page-headers errors."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: str = None,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize error.

        Args:
            message: Human-readable error message
            status_code: HTTP status code
            error_code: Machine-readable error code
            details: Additional error details
        """
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_code = error_code or self.__class__.__name__.upper()
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary format."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details
        }


class PaginationError(PageHeadersError):
    """A view or paginator handed over something that is not a page."""

    def __init__(self, message: str, details: Optional[Dict] = None):
        super().__init__(message, status_code=500, error_code="PAGINATION_ERROR", details=details)


def register_error_handlers(app):
    """
    Register error handlers with Flask app.

    Args:
        app: Flask application instance
    """

    @app.errorhandler(PageHeadersError)
    def handle_page_headers_error(error: PageHeadersError):
        """Handle page-headers errors."""
        logger.warning(
            "Pagination headers not attached",
            error_code=error.error_code,
            error_message=error.message,
        )
        response = jsonify(error.to_dict())
        response.status_code = error.status_code
        return response
