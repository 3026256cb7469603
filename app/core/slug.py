"""
Slug construction shared with the catalog indexer.
"""

from typing import Optional, Union

SLUG_SEPARATOR = "-"


def construct_slug(slug_name: Optional[str], slug_postfix: Union[int, str, None]) -> Optional[str]:
    """Join slug name and postfix ("abbey-road-2"); postfix dropped when empty or 0."""
    if not slug_name:
        return None
    if slug_postfix in (None, "", 0, "0"):
        return slug_name
    return f"{slug_name}{SLUG_SEPARATOR}{slug_postfix}"
