"""
CSV export of the current places view.

The export covers every row matching the current filter, in the current sort
order, independent of which page is on screen. Text columns are always
wrapped in double quotes; numeric and link columns are written bare.
"""
from datetime import date
from pathlib import Path
from typing import List, Optional, Union

from loguru import logger

from placescout.config import APP_NAME
from placescout.display import format_score, status_label
from placescout.models import Place, ViewState
from placescout.view.view_orchestrator import visible_places

CSV_COLUMNS = [
    "Business Name",
    "Category",
    "Rating",
    "Reviews",
    "Phone",
    "Address",
    "City",
    "State",
    "Website",
    "Status",
]

_NEEDS_QUOTING = (",", '"', "\n", "\r")


def _quoted(value: Optional[str]) -> str:
    """Always-quoted text cell; embedded quotes are doubled."""
    return '"' + (value or "").replace('"', '""') + '"'


def _bare(value: Optional[str]) -> str:
    """Unquoted cell, quoted only when the value would break the row."""
    text = value or ""
    if any(ch in text for ch in _NEEDS_QUOTING):
        return _quoted(text)
    return text


def _number(value: Optional[float]) -> str:
    # 0 and missing both export as an empty cell
    if not value:
        return ""
    return format_score(value)


def place_to_row(place: Place) -> str:
    """Serialize one place into a CSV line (no trailing newline)."""
    return ",".join([
        _quoted(place.title),
        _quoted(place.category_name),
        _number(place.total_score),
        _number(place.reviews_count),
        _bare(place.phone),
        _quoted(place.address),
        _quoted(place.city),
        _quoted(place.state),
        _bare(place.website),
        status_label(place),
    ])


def places_to_csv(places: List[Place]) -> str:
    """Header plus one line per place, in the given order, joined with ``\\n``."""
    lines = [",".join(CSV_COLUMNS)]
    lines.extend(place_to_row(place) for place in places)
    return "\n".join(lines)


def export_csv(places: List[Place], view_state: ViewState) -> str:
    """
    Serialize the filtered, sorted view of the full result set.

    Args:
        places (List[Place]): Normalized full result set (not a single page).
        view_state (ViewState): Current view; its filter and sort are applied,
                                its page and page size are ignored.

    Returns:
        str: CSV text blob.
    """
    rows = visible_places(places, view_state)
    logger.debug(f"Exporting {len(rows)} of {len(places)} places to CSV")
    return places_to_csv(rows)


def export_filename(search_term: str, location: str, day: Optional[date] = None) -> str:
    """
    Download name for an export, e.g. ``placescout-gyms-London, UK-2024-05-01.csv``.
    """
    day = day or date.today()
    return f"{APP_NAME}-{search_term}-{location}-{day.isoformat()}.csv"


def write_csv(content: str, output_path: Union[str, Path]) -> Path:
    """Write an export blob to disk as UTF-8 and return the path written."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", newline="", encoding="utf-8") as f:
        f.write(content)
    logger.info(f"Wrote CSV export to {output_path}")
    return output_path
