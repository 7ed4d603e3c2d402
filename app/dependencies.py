# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection and small helpers shared by the routers.
# =============================================================================

from typing import Annotated

from fastapi import Depends, Query

from app.config import settings
from app.exceptions import InvalidIdError
from lib.utils import parse_int_id


def resolve_id(raw_id: str, resource: str) -> int:
    """
    Turn a path segment into a numeric id.

    Path ids are declared as strings so a malformed id is a 400 with our
    error body, raised after authentication has run, instead of FastAPI's 422.

    Raises:
        InvalidIdError: If the segment isn't a positive integer
    """
    parsed = parse_int_id(raw_id)
    if parsed is None:
        raise InvalidIdError(raw_id, resource)
    return parsed


def get_pagination(
    page: Annotated[int, Query(ge=1, description="Page number")] = 1,
    page_size: Annotated[int | None, Query(ge=1, le=100, description="Items per page")] = None,
) -> tuple[int, int]:
    """Page number and size, defaulting the size from settings."""
    return page, page_size or settings.DEFAULT_PAGE_SIZE


# Type alias for dependency injection
PaginationDep = Annotated[tuple[int, int], Depends(get_pagination)]
