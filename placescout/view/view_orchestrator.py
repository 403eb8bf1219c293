# placescout/view/view_orchestrator.py

from typing import Any, List
from loguru import logger

from placescout.field_resolver import is_places_data, resolve_places
from placescout.models import NonTabularResult, Place, TableView, ViewResult, ViewState
from placescout.view.filter_engine import filter_places
from placescout.view.paginator import paginate, total_pages
from placescout.view.sort_engine import sort_places
from placescout.view.stats import calculate_stats
from placescout.view.view_state import clamp_page


def visible_places(places: List[Place], view_state: ViewState) -> List[Place]:
    """
    Filter then sort the full normalized set according to the view state.

    This is the "current view" used both for the table and for CSV export;
    pagination is applied afterwards and only by the table.
    """
    filtered = filter_places(places, view_state.filter_text)
    return sort_places(filtered, view_state.sort_field, view_state.sort_direction)


def build_table_view(places: List[Place], view_state: ViewState) -> TableView:
    """
    Run stats, filter, sort and pagination over an already-resolved set.

    Args:
        places (List[Place]): Normalized full result set.
        view_state (ViewState): Requested view parameters.

    Returns:
        TableView: Derived view. Its ``view_state`` has ``current_page`` clamped
                   into range, which may differ from the requested one.
    """
    ordered = visible_places(places, view_state)
    state = clamp_page(view_state, len(ordered))

    return TableView(
        places=places,
        stats=calculate_stats(places),
        displayed_page=paginate(ordered, state.current_page, state.page_size),
        total_filtered_count=len(ordered),
        total_pages=total_pages(len(ordered), state.page_size),
        view_state=state,
    )


def build_view(raw_records: Any, view_state: ViewState) -> ViewResult:
    """
    Turn a fetched payload plus view parameters into something renderable.

    Args:
        raw_records (Any): Payload as received. Usually a list of dicts.
        view_state (ViewState): Current view parameters.

    Returns:
        ViewResult: TableView for places data, NonTabularResult otherwise so the
                    caller can fall back to a generic key-value rendering.
    """
    if not is_places_data(raw_records):
        return NonTabularResult(data=raw_records)

    places = resolve_places(raw_records)
    view = build_table_view(places, view_state)
    logger.debug(
        f"View: {view.total_filtered_count}/{len(places)} places match "
        f"'{view_state.filter_text}', page {view.view_state.current_page}/{view.total_pages}"
    )
    return view
