"""RFC 5988 ``Link`` header construction for paginated responses.

Given where a request came from and which page of a collection it returned,
build the ``first``/``last``/``next``/``prev`` links plus the ``Total`` and
``Per-Page`` headers, and write them onto a response.
"""
from typing import Dict, List, MutableMapping, NamedTuple, Protocol, Tuple
from urllib.parse import parse_qsl, urlencode

from loguru import logger

LINK_HEADER = "Link"
TOTAL_HEADER = "Total"
PER_PAGE_HEADER = "Per-Page"

PAGE_PARAM = "page"

# Suppressed for every scheme, not only the one they belong to
DEFAULT_PORTS = (80, 443)

RELATIONS = ("first", "last", "next", "prev")


class RequestOriginLike(Protocol):
    """Read-only view of the inbound request URL."""

    scheme: str
    host: str
    port: int
    path: str
    query_string: str


class PageLike(Protocol):
    """Read-only page descriptor computed by the paginator."""

    page_number: int
    page_size: int
    total_pages: int
    total_entries: int


class ResponseLike(Protocol):
    """Anything with a replace-on-assign header collection."""

    headers: MutableMapping[str, str]


class PageRelation(NamedTuple):
    """One candidate link: relation name, page it targets, whether it is emitted."""

    rel: str
    target_page: int
    included: bool


def page_relations(page: PageLike) -> List[PageRelation]:
    """
    Candidate relations for a page, in ``first, last, next, prev`` order.

    ``last`` is ``total_pages`` as given, so an empty collection links to page 0.
    """
    number = page.page_number
    total = page.total_pages
    return [
        PageRelation("first", 1, True),
        PageRelation("last", total, True),
        PageRelation("next", number + 1, number != total),
        PageRelation("prev", number - 1, number != 1),
    ]


def merge_page_param(query_string: str, page_number: int) -> str:
    """Return ``query_string`` with its ``page`` parameter set to ``page_number``."""
    params = dict(parse_qsl(query_string, keep_blank_values=True))
    params[PAGE_PARAM] = str(page_number)
    return urlencode(params)


def page_url(origin: RequestOriginLike, page_number: int) -> str:
    """Absolute URL of the current request pointing at ``page_number``."""
    query = merge_page_param(origin.query_string, page_number)
    port = "" if origin.port in DEFAULT_PORTS else f":{origin.port}"
    if query:
        query = f"?{query}"
    return f"{origin.scheme}://{origin.host}{port}{origin.path}{query}"


def build_links(origin: RequestOriginLike, page: PageLike) -> List[Tuple[str, str]]:
    """Ordered ``(rel, url)`` pairs for every relation that applies to ``page``."""
    return [
        (relation.rel, page_url(origin, relation.target_page))
        for relation in page_relations(page)
        if relation.included
    ]


def format_link_header(links: List[Tuple[str, str]]) -> str:
    """Render ``(rel, url)`` pairs as an RFC 5988 ``Link`` header value."""
    return ", ".join(f'<{url}>; rel="{rel}"' for rel, url in links)


def pagination_headers(origin: RequestOriginLike, page: PageLike) -> Dict[str, str]:
    """
    Compute the pagination headers for a response.

    Args:
        origin: Scheme, host, port, path and raw query string of the request
        page: Page descriptor for the collection being returned

    Returns:
        ``{"Link": ..., "Total": ..., "Per-Page": ...}`` in that order
    """
    links = build_links(origin, page)
    logger.debug(
        "Pagination links built",
        rels=[rel for rel, _ in links],
        total=page.total_entries,
    )
    return {
        LINK_HEADER: format_link_header(links),
        TOTAL_HEADER: str(page.total_entries),
        PER_PAGE_HEADER: str(page.page_size),
    }


def attach_pagination_headers(
    response: ResponseLike, origin: RequestOriginLike, page: PageLike
) -> ResponseLike:
    """Set ``Link``, ``Total`` and ``Per-Page`` on ``response`` and return it."""
    for name, value in pagination_headers(origin, page).items():
        response.headers[name] = value
    return response
