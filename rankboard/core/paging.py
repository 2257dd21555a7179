"""Page arithmetic for descending leaderboards.

Pages are 1-based. A page covers the inclusive 0-based position range
``[(page - 1) * size, page * size - 1]``.
"""
from typing import Tuple

ALLOWED_PAGE_SIZES = frozenset({10, 25, 50, 100})
DEFAULT_PAGE_SIZE = 25


def is_valid_page_size(size) -> bool:
    if isinstance(size, bool) or not isinstance(size, int):
        return False
    return size in ALLOWED_PAGE_SIZES


def resolve_page_size(size) -> int:
    """Return size when allowed, otherwise the default page size"""
    return size if is_valid_page_size(size) else DEFAULT_PAGE_SIZE


def total_pages(count: int, size: int) -> int:
    """ceil(count / size); an empty board has no pages"""
    if count <= 0:
        return 0
    return (count + size - 1) // size


def clamp_page(page: int, pages: int) -> int:
    """Clamp page into [1, pages]. Callers handle pages == 0 themselves."""
    if page < 1:
        return 1
    if page > pages:
        return pages
    return page


def page_bounds(page: int, size: int) -> Tuple[int, int]:
    """Inclusive start and end positions of a page"""
    start = (page - 1) * size
    return start, start + size - 1
