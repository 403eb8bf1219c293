from typing import List
from placescout.models import Place


def _searchable_fields(place: Place) -> List[str]:
    return [place.title, place.category_name, place.address, place.city or ""]


def matches_filter(place: Place, filter_text: str) -> bool:
    """
    Case-insensitive substring test against title, category, address and city.

    Args:
        place (Place): Candidate place.
        filter_text (str): Free-text query. An empty query matches everything.

    Returns:
        bool: True if any searchable field contains the query.
    """
    if not filter_text:
        return True
    needle = filter_text.lower()
    return any(needle in (value or "").lower() for value in _searchable_fields(place))


def filter_places(places: List[Place], filter_text: str) -> List[Place]:
    """Return the places matching ``filter_text``, same objects, same order."""
    if not filter_text:
        return list(places)
    return [place for place in places if matches_filter(place, filter_text)]
