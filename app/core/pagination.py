"""
Offset and page metadata for paginated search results.
"""

from ..schemas.search import Pagination


def compute_offset(page: int, per_page: int) -> int:
    """Offset of the first item on a 1-based page."""
    return (page - 1) * per_page


def total_pages(total_matches: int, per_page: int) -> int:
    # Ceiling division; 0 matches -> 0 pages
    return -(-total_matches // per_page)


def describe_pagination(page: int, per_page: int, total_matches: int) -> Pagination:
    return Pagination(
        page_number=page,
        per_page=per_page,
        total_matches=total_matches,
        total_pages=total_pages(total_matches, per_page),
    )
