from typing import Any, List
from placescout.models import Place, SortDirection, SortField


def sort_key(place: Place, sort_field: SortField) -> Any:
    """
    Comparable key for one place.

    Numeric columns treat a missing value as 0; text columns compare lower-cased
    with a missing value as the empty string.
    """
    value = getattr(place, sort_field.attribute)
    if sort_field.is_numeric:
        return value or 0
    return (value or "").lower()


def sort_places(
    places: List[Place],
    sort_field: SortField,
    sort_direction: SortDirection,
) -> List[Place]:
    """
    Order places by a single column.

    There is no secondary key: Python's sort is stable, so tied rows keep the
    order they arrived in for both directions.

    Args:
        places (List[Place]): Places to order. The input list is not modified.
        sort_field (SortField): Column to sort on.
        sort_direction (SortDirection): ASC puts the lowest value first, DESC the highest.

    Returns:
        List[Place]: A new, sorted list.
    """
    return sorted(
        places,
        key=lambda place: sort_key(place, sort_field),
        reverse=sort_direction is SortDirection.DESC,
    )
