from typing import List, Optional
from placescout.models import Place, SearchStats


def calculate_stats(places: List[Place]) -> Optional[SearchStats]:
    """
    Compute headline metrics for a full (unfiltered, unpaginated) result set.

    Places without a rating count as 0 in the average, so unrated listings pull
    it down instead of being skipped.

    Args:
        places (List[Place]): Normalized full result set.

    Returns:
        Optional[SearchStats]: None for an empty set; there is nothing to summarise
                               and zero-filled stats would read like a finished search.
    """
    if not places:
        return None

    total_places = len(places)
    avg_rating = sum(place.total_score or 0 for place in places) / total_places
    open_now = sum(1 for place in places if place.is_open)
    has_website = sum(1 for place in places if place.website)

    return SearchStats(
        total_places=total_places,
        avg_rating=avg_rating,
        open_now=open_now,
        has_website=has_website,
    )
