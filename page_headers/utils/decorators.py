"""View decorators for paginated endpoints."""
from functools import wraps

from flask import current_app, make_response

from page_headers.extension import paginate
from page_headers.middleware.origin import expose_pagination_headers
from page_headers.utils.errors import PaginationError


def paginated(fn):
    """
    Decorator for views that return a body together with its page.

    The view returns ``(body, page)`` or ``(body, page, status)``; the
    response gets the pagination headers for ``page``.

    Usage:
        @app.route("/people")
        @paginated
        def people():
            page = Page.from_total(number, 20, total, rows)
            return jsonify(rows), page
    """

    @wraps(fn)
    def wrapper(*args, **kwargs):
        result = fn(*args, **kwargs)

        if not isinstance(result, tuple) or len(result) not in (2, 3):
            raise PaginationError(
                "Paginated view must return (body, page) or (body, page, status)",
                details={"view": fn.__name__},
            )

        body, page = result[0], result[1]
        response = paginate(make_response(body, *result[2:]), page)

        if current_app.config.get("PAGE_HEADERS_EXPOSE", True):
            expose_pagination_headers(response)
        return response

    return wrapper
