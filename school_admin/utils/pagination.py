# school_admin/utils/pagination.py
"""Pagination utilities for consistent search responses."""
from math import ceil
from typing import Any, List, Sequence

from ..schemas.pagination import PaginatedResponse, PaginationParams


class Paginator:
    """Pagination utility class."""

    @staticmethod
    def calculate_offset(page: int, size: int) -> int:
        """Calculate the slice start for a 0-based page."""
        return page * size

    @staticmethod
    def total_pages(total: int, size: int) -> int:
        return ceil(total / size) if size > 0 else 0

    @staticmethod
    def single_page(items: Sequence[Any]) -> PaginatedResponse:
        """Whole result set as one page, for unpaginated requests."""
        items = list(items)
        return PaginatedResponse(
            content=items,
            total_elements=len(items),
            total_pages=1,
            number=0,
            size=len(items),
            first=True,
            last=True,
        )

    @staticmethod
    def paginate(items: Sequence[Any], params: PaginationParams) -> PaginatedResponse:
        """Slice ``items`` into the page described by ``params``."""
        if params.unpaginated:
            return Paginator.single_page(items)

        total = len(items)
        start = Paginator.calculate_offset(params.page, params.size)
        end = start + params.size
        content: List[Any] = list(items[start:end])

        return PaginatedResponse(
            content=content,
            total_elements=total,
            total_pages=Paginator.total_pages(total, params.size),
            number=params.page,
            size=params.size,
            first=params.page == 0,
            last=end >= total,
        )
