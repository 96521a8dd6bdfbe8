from __future__ import annotations

from typing import Any, Callable, Dict, List, TypeVar

from ..core.exceptions import ApiError

T = TypeVar("T")


def as_list(data: Any, *, endpoint: str) -> List[Dict[str, Any]]:
    """Normalize a list response.

    The backend answers `null` for owners without records; that is an empty list.
    """
    if data is None:
        return []
    if not isinstance(data, list):
        raise ApiError(f"{endpoint} returned {type(data).__name__}, expected a list", endpoint=endpoint)
    return [row for row in data if isinstance(row, dict)]


def as_dict(data: Any, *, endpoint: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise ApiError(f"{endpoint} returned {type(data).__name__}, expected an object", endpoint=endpoint)
    return data


def parse_rows(data: Any, parse: Callable[[Dict[str, Any]], T], *, endpoint: str) -> List[T]:
    """Parse every row of a list response; a malformed row fails the whole response."""
    try:
        return [parse(row) for row in as_list(data, endpoint=endpoint)]
    except (KeyError, TypeError, ValueError) as e:
        raise ApiError(f"{endpoint} returned a malformed row: {e!r}", endpoint=endpoint) from e
