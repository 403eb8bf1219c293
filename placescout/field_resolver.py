"""
Normalize loosely-typed place records into canonical Place objects.

Webhook payloads are not always shaped the same way: some sources send
``name``/``rating``/``reviews`` where others send ``title``/``totalScore``/
``reviewsCount``, numeric columns may arrive as strings, and records loaded
through pandas carry NaN and numpy scalars. Every fallback rule lives here so
the rest of the engine can rely on a fixed set of attributes.
"""
from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Sequence, Tuple

import numpy as np
from loguru import logger

from placescout.models import OpeningHours, Place

# canonical key -> accepted source keys, in resolution order
FIELD_ALIASES: Dict[str, Tuple[str, ...]] = {
    "title": ("title", "name"),
    "categoryName": ("categoryName", "category"),
    "totalScore": ("totalScore", "rating"),
    "reviewsCount": ("reviewsCount", "reviews"),
    "city": ("city", "location"),
    "state": ("state", "region"),
}


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (float, np.floating)):
        return bool(np.isnan(value))
    return False


def _lookup(raw: Mapping, key: str) -> Any:
    """Return the first non-blank value among the aliases of ``key``."""
    for source_key in FIELD_ALIASES.get(key, (key,)):
        value = raw.get(source_key)
        if not _is_blank(value):
            return value
    return None


def _as_text(value: Any) -> Optional[str]:
    if _is_blank(value):
        return None
    if isinstance(value, str):
        return value
    # pandas turns numeric-looking columns (postal codes) into floats
    if isinstance(value, (float, np.floating)) and float(value).is_integer():
        return str(int(value))
    return str(value)


def _as_number(value: Any) -> Optional[float]:
    """Parse a rating-like value; anything unparseable or non-finite counts as absent."""
    if _is_blank(value) or isinstance(value, (bool, np.bool_)):
        return None
    if isinstance(value, str):
        value = value.strip().replace(",", "")
    elif not isinstance(value, (int, float, np.integer, np.floating)):
        return None
    try:
        number = float(value)
    except (ValueError, OverflowError):
        return None
    return number if np.isfinite(number) else None


def _as_count(value: Any) -> int:
    number = _as_number(value)
    if number is None:
        return 0
    return int(round(number))


def _as_flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes")
    if _is_blank(value):
        return False
    return bool(value)


def _as_opening_hours(value: Any) -> List[OpeningHours]:
    if not isinstance(value, (list, tuple)):
        return []
    hours = []
    for entry in value:
        if isinstance(entry, Mapping) and entry.get("day"):
            hours.append(OpeningHours(day=str(entry["day"]), hours=_as_text(entry.get("hours")) or ""))
    return hours


def resolve_place(raw: Any) -> Place:
    """
    Map one raw record onto a Place.

    Primary keys win over their alternates; an alternate is used only when the
    primary is missing, None, NaN or an empty string. Missing strings become
    ``""`` (required columns) or ``None`` (optional ones), missing counts 0 and
    a missing rating stays ``None``.

    Args:
        raw: One element of the fetched payload. Non-mapping values resolve to
            an empty Place instead of raising.

    Returns:
        Place: The canonical record. ``raw`` holds a shallow copy of the source mapping.
    """
    if not isinstance(raw, Mapping):
        return Place()

    return Place(
        title=_as_text(_lookup(raw, "title")) or "",
        sub_title=_as_text(raw.get("subTitle")),
        category_name=_as_text(_lookup(raw, "categoryName")) or "",
        address=_as_text(raw.get("address")) or "",
        phone=_as_text(raw.get("phone")),
        total_score=_as_number(_lookup(raw, "totalScore")),
        reviews_count=_as_count(_lookup(raw, "reviewsCount")),
        website=_as_text(raw.get("website")),
        image_url=_as_text(raw.get("imageUrl")),
        permanently_closed=_as_flag(raw.get("permanentlyClosed")),
        temporarily_closed=_as_flag(raw.get("temporarilyClosed")),
        city=_as_text(_lookup(raw, "city")),
        state=_as_text(_lookup(raw, "state")),
        postal_code=_as_text(raw.get("postalCode")),
        neighborhood=_as_text(raw.get("neighborhood")),
        opening_hours=_as_opening_hours(raw.get("openingHours")),
        raw=dict(raw),
    )


def resolve_places(records: Sequence[Any]) -> List[Place]:
    """Resolve every record of a payload, keeping payload order."""
    return [resolve_place(raw) for raw in records]


def is_tabular_record(raw: Any) -> bool:
    """True when the record has a non-empty title (or name) and address."""
    if not isinstance(raw, Mapping):
        return False
    return bool(_as_text(_lookup(raw, "title"))) and bool(_as_text(raw.get("address")))


def is_places_data(data: Any) -> bool:
    """
    Decide whether a fetched payload should be shown as a places table.

    The payload qualifies when it is a non-empty list and at least one of its
    elements looks like a place (title-equivalent plus address). Anything else
    (error bodies, plain text, objects) goes to the generic key-value view.
    """
    if not isinstance(data, (list, tuple)) or not data:
        logger.debug(f"Payload of type {type(data).__name__} is not a non-empty list; not tabular")
        return False
    tabular = any(is_tabular_record(raw) for raw in data)
    if not tabular:
        logger.debug(f"None of {len(data)} records has both a title and an address; not tabular")
    return tabular
