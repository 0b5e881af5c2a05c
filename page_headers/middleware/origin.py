"""Request origin extraction and the pagination header hooks."""
from urllib.parse import urlsplit

from flask import current_app, g, request
from loguru import logger

from page_headers.links import (
    LINK_HEADER,
    PER_PAGE_HEADER,
    TOTAL_HEADER,
    attach_pagination_headers,
)

EXPOSE_HEADER = "Access-Control-Expose-Headers"
EXPOSED = (LINK_HEADER, TOTAL_HEADER, PER_PAGE_HEADER)

SCHEME_PORTS = {"http": 80, "https": 443}


class RequestOrigin:
    """Scheme, host, port, path and raw query string of an inbound request."""

    __slots__ = ("scheme", "host", "port", "path", "query_string")

    def __init__(self, scheme: str, host: str, port: int, path: str, query_string: str = ""):
        self.scheme = scheme
        self.host = host
        self.port = port
        self.path = path
        self.query_string = query_string

    @classmethod
    def from_request(cls, req) -> "RequestOrigin":
        """
        Read the origin of a Flask/werkzeug request.

        The port comes from the ``Host`` header, falling back to the scheme's
        well-known port. The path is taken undecoded from the request URI so
        escapes such as ``%2F`` survive.
        """
        scheme = req.scheme
        host, _, port = req.host.rpartition(":")
        # bare host, or a bracketed IPv6 literal with no port
        if not host or host.endswith(":") or port.endswith("]"):
            host, port = req.host, ""
        return cls(
            scheme=scheme,
            host=host,
            port=int(port) if port.isdigit() else SCHEME_PORTS.get(scheme, 80),
            path=raw_request_path(req),
            query_string=req.query_string.decode("utf-8", "replace"),
        )

    def __repr__(self) -> str:
        return (
            f"RequestOrigin(scheme={self.scheme!r}, host={self.host!r}, port={self.port!r}, "
            f"path={self.path!r}, query_string={self.query_string!r})"
        )


class PaginationHeadersMiddleware:
    """
    Hooks that attach pagination headers to responses.

    A view registers the page it served with ``set_current_page``; the
    ``after_request`` hook turns it into ``Link``, ``Total`` and ``Per-Page``.
    """

    @staticmethod
    def clear_current_page():
        """Reset the page stored on the request context."""
        g.pop("pagination_page", None)

    @staticmethod
    def inject_pagination_headers(response):
        """Attach headers for the page stored by the view, if any."""
        page = g.get("pagination_page")
        if page is None:
            return response

        attach_pagination_headers(response, RequestOrigin.from_request(request), page)

        if current_app.config.get("PAGE_HEADERS_EXPOSE", True):
            expose_pagination_headers(response)

        logger.debug(
            "Pagination headers attached",
            path=request.path,
            page_number=page.page_number,
        )
        return response


def expose_pagination_headers(response) -> None:
    """Add the pagination header names to ``Access-Control-Expose-Headers``."""
    current = [
        name.strip()
        for name in response.headers.get(EXPOSE_HEADER, "").split(",")
        if name.strip()
    ]
    known = {name.lower() for name in current}
    current.extend(name for name in EXPOSED if name.lower() not in known)
    response.headers[EXPOSE_HEADER] = ", ".join(current)


def raw_request_path(req) -> str:
    """
    Percent-encoded path of ``req``, script root included.

    Uses ``RAW_URI``/``REQUEST_URI`` when the server provides them and
    falls back to ``base_url``, which is rebuilt from the decoded path.
    """
    raw_uri = req.environ.get("RAW_URI") or req.environ.get("REQUEST_URI")
    if not raw_uri:
        return urlsplit(req.base_url).path

    # WSGI strings carry the raw bytes as latin-1
    raw_uri = raw_uri.encode("latin-1", "replace").decode("utf-8", "replace")
    if raw_uri.startswith("/"):
        path = raw_uri.partition("?")[0]
    else:
        # absolute-form request target
        path = urlsplit(raw_uri).path
    script_root = urlsplit(req.root_url).path.rstrip("/")
    if script_root and not path.startswith(script_root + "/") and path != script_root:
        path = script_root + path
    return path
