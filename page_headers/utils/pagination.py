"""Page descriptors handed to the header builder."""
from collections.abc import Mapping
from typing import Any, Dict, List, Optional

from page_headers.utils.errors import PaginationError

PAGE_FIELDS = ("page_number", "page_size", "total_pages", "total_entries")

# Flask-SQLAlchemy ``Pagination`` attribute -> Page field
PAGINATION_FIELDS = {
    "page": "page_number",
    "per_page": "page_size",
    "pages": "total_pages",
    "total": "total_entries",
}


class Page:
    """One page of a paginated collection."""

    def __init__(
        self,
        page_number: int,
        page_size: int,
        total_pages: int,
        total_entries: int,
        entries: Optional[List[Any]] = None
    ):
        """
        Initialize page.

        Args:
            page_number: Current page number (1-indexed)
            page_size: Items per page
            total_pages: Number of pages in the collection
            total_entries: Total number of items across all pages
            entries: Items on the current page
        """
        self.page_number = page_number
        self.page_size = page_size
        self.total_pages = total_pages
        self.total_entries = total_entries
        self.entries = entries if entries is not None else []

    @classmethod
    def from_total(
        cls,
        page_number: int,
        page_size: int,
        total_entries: int,
        entries: Optional[List[Any]] = None
    ) -> "Page":
        """Build a page, deriving ``total_pages`` from the item count."""
        total_pages = (total_entries + page_size - 1) // page_size if page_size > 0 else 0
        return cls(page_number, page_size, total_pages, total_entries, entries)

    def to_dict(self) -> Dict[str, Any]:
        """Convert page to dictionary format."""
        return {
            "entries": self.entries,
            "page_number": self.page_number,
            "page_size": self.page_size,
            "total_pages": self.total_pages,
            "total_entries": self.total_entries,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Page):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return (
            f"Page(page_number={self.page_number}, page_size={self.page_size}, "
            f"total_pages={self.total_pages}, total_entries={self.total_entries})"
        )


def _lookup(source: Any, name: str) -> Any:
    if isinstance(source, Mapping):
        return source[name]
    return getattr(source, name)


def _has_all(source: Any, names) -> bool:
    if isinstance(source, Mapping):
        return all(name in source for name in names)
    return all(hasattr(source, name) for name in names)


def as_page(source: Any) -> Page:
    """
    Coerce a paginator result into a :class:`Page`.

    Accepts a ``Page``, any object or mapping exposing the ``Page`` fields,
    or a Flask-SQLAlchemy style ``Pagination`` (``page``, ``per_page``,
    ``pages``, ``total``, ``items``). Values are converted with ``int()``
    but not range-checked.

    Raises:
        PaginationError: If ``source`` has neither set of fields
    """
    if isinstance(source, Page):
        return source

    if _has_all(source, PAGE_FIELDS):
        fields = {name: int(_lookup(source, name)) for name in PAGE_FIELDS}
        entries_key = "entries"
    elif _has_all(source, PAGINATION_FIELDS):
        fields = {
            field: int(_lookup(source, name)) for name, field in PAGINATION_FIELDS.items()
        }
        entries_key = "items"
    else:
        raise PaginationError(
            "Cannot read pagination metadata",
            details={"type": type(source).__name__},
        )

    entries = None
    if _has_all(source, (entries_key,)):
        entries = list(_lookup(source, entries_key))

    return Page(entries=entries, **fields)
