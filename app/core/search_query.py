"""
Index query payloads.
"""

from typing import Any, Dict


def build_match_query(name_entry: str) -> Dict[str, Any]:
    """Match query on the indexed 'name' field; analysis is left to the backend."""
    return {"match": {"name": name_entry}}


def build_search_body(name_entry: str, offset: int, size: int) -> Dict[str, Any]:
    return {
        "query": build_match_query(name_entry),
        "from": offset,
        "size": size,
    }
