import math
from typing import List, Tuple
from placescout.models import Place


def _check_page_size(page_size: int) -> None:
    if page_size < 1:
        raise ValueError(f"page_size must be a positive integer, got {page_size}")


def total_pages(total_count: int, page_size: int) -> int:
    """Number of pages needed for ``total_count`` rows; never less than 1."""
    _check_page_size(page_size)
    return max(1, math.ceil(total_count / page_size))


def page_bounds(current_page: int, page_size: int, total_count: int) -> Tuple[int, int]:
    """
    Half-open ``[start, end)`` row range of a page, clamped to ``[0, total_count]``.

    Out-of-range pages give an empty range rather than an error.
    """
    _check_page_size(page_size)
    start = min(max((current_page - 1) * page_size, 0), total_count)
    end = min(max(current_page * page_size, start), total_count)
    return start, end


def paginate(places: List[Place], current_page: int, page_size: int) -> List[Place]:
    """
    Slice one page out of an already filtered and sorted list.

    Args:
        places (List[Place]): Filtered, sorted places.
        current_page (int): 1-based page number.
        page_size (int): Rows per page, any positive integer.

    Returns:
        List[Place]: The rows on that page (possibly empty).
    """
    start, end = page_bounds(current_page, page_size, len(places))
    return places[start:end]
