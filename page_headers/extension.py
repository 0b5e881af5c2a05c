"""Flask extension wiring the pagination headers into an application."""
from typing import Any, Optional

from flask import Flask, g, request as flask_request
from loguru import logger

from page_headers.core.config import CONFIG_KEYS, Config
from page_headers.links import attach_pagination_headers
from page_headers.middleware.origin import PaginationHeadersMiddleware, RequestOrigin
from page_headers.utils.errors import register_error_handlers
from page_headers.utils.pagination import Page, as_page


def set_current_page(page: Any) -> Page:
    """Store the page served by the current request for the after-request hook."""
    g.pagination_page = as_page(page)
    return g.pagination_page


def get_current_page() -> Optional[Page]:
    """Page stored for the current request, if any."""
    return g.get("pagination_page")


def paginate(response, page: Any, request=None):
    """
    Add pagination headers for ``page`` to a Flask response.

    Args:
        response: Flask response object
        page: ``Page`` or anything :func:`as_page` accepts
        request: Request to read the origin from, defaults to the active one

    Returns:
        The same response
    """
    origin = RequestOrigin.from_request(request if request is not None else flask_request)
    return attach_pagination_headers(response, origin, as_page(page))


class PageHeaders:
    """
    Flask extension attaching ``Link``, ``Total`` and ``Per-Page`` headers.

    Usage:
        page_headers = PageHeaders(app)

        @app.route("/people")
        def people():
            set_current_page(Page.from_total(1, 20, 134, entries))
            return jsonify(entries)
    """

    def __init__(self, app: Optional[Flask] = None):
        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask) -> None:
        """Register config defaults, hooks and error handlers on ``app``."""
        for key in CONFIG_KEYS:
            app.config.setdefault(key, getattr(Config, key))

        app.before_request(PaginationHeadersMiddleware.clear_current_page)
        app.after_request(PaginationHeadersMiddleware.inject_pagination_headers)
        register_error_handlers(app)

        app.extensions["page_headers"] = self
        logger.info("Pagination headers registered", app=app.import_name)
