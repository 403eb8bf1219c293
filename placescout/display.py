"""Presentation strings shared by the CLI and any front end."""
from datetime import date
from typing import List, Optional

from placescout.models import OpeningHours, Place, SearchStats, TableView
from placescout.view.paginator import page_bounds


def status_label(place: Place) -> str:
    """Closure status; a permanent closure wins over a temporary one."""
    if place.permanently_closed:
        return "Permanently Closed"
    if place.temporarily_closed:
        return "Temporarily Closed"
    return "Open"


def format_score(value: float) -> str:
    """Score as entered: ``4.56`` stays ``"4.56"``, integral values drop the ``.0``."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def rating_label(place: Place) -> str:
    if not place.total_score:
        return "No rating"
    return format_score(place.total_score)


def today_opening_hours(hours: List[OpeningHours], today: Optional[date] = None) -> str:
    """``"Monday: 9 AM-5 PM"`` for today's weekday, if the place lists it."""
    weekday = (today or date.today()).strftime("%A")
    for entry in hours:
        if entry.day == weekday:
            return f"{entry.day}: {entry.hours}"
    return "Hours not available"


def http_status_class(status: int) -> str:
    if 200 <= status < 300:
        return "success"
    if 400 <= status < 500:
        return "client-error"
    if status >= 500:
        return "server-error"
    return "other"


def stats_summary(stats: SearchStats) -> str:
    return (
        f"{stats.total_places} places found | avg rating {stats.avg_rating:.1f} | "
        f"{stats.open_now} open now | {stats.has_website} with website"
    )


def pagination_summary(view: TableView) -> Optional[str]:
    """``"Showing 11 to 20 of 25 results"``; None when everything fits on one page."""
    if view.total_pages <= 1:
        return None
    state = view.view_state
    start, end = page_bounds(state.current_page, state.page_size, view.total_filtered_count)
    return f"Showing {start + 1} to {end} of {view.total_filtered_count} results"
