"""Page slicing shared by the student and course listings."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar

T = TypeVar("T")


def paginate(
    items: Sequence[T], page: int | None, limit: int | None
) -> tuple[list[T], dict[str, Any] | None]:
    """Slice ``items`` to one page.

    Pagination applies only when both ``page`` and ``limit`` are positive;
    otherwise every item is returned and the paginator is None.

    Returns:
        (page_items, paginator) where paginator is
        ``{"limit", "page", "total"}`` and total counts all ``items``.
    """
    if not page or not limit or page < 1 or limit < 1:
        return list(items), None

    start = limit * (page - 1)
    paginator = {"limit": limit, "page": page, "total": len(items)}
    return list(items[start:start + limit]), paginator
