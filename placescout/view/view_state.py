"""
Pure transitions for ViewState.

Every user action maps to one function here that returns a new ViewState.
Anything that changes which rows are shown or their order (filter text, sort
column, sort direction, page size) sends the user back to page 1.
"""
from dataclasses import replace
from placescout.models import SortDirection, SortField, ViewState
from placescout.view.paginator import total_pages


def toggle_sort(state: ViewState, sort_field: SortField) -> ViewState:
    """
    Clicking the active column flips its direction; clicking another column
    selects it in descending order so the best rows come first.
    """
    if state.sort_field is sort_field:
        return replace(state, sort_direction=state.sort_direction.flipped(), current_page=1)
    return replace(state, sort_field=sort_field, sort_direction=SortDirection.DESC, current_page=1)


def set_sort(state: ViewState, sort_field: SortField, sort_direction: SortDirection) -> ViewState:
    """Select a column and direction explicitly (CLI flags, restored links)."""
    if state.sort_field is sort_field and state.sort_direction is sort_direction:
        return state
    return replace(state, sort_field=sort_field, sort_direction=sort_direction, current_page=1)


def set_filter_text(state: ViewState, filter_text: str) -> ViewState:
    if filter_text == state.filter_text:
        return state
    return replace(state, filter_text=filter_text, current_page=1)


def set_page_size(state: ViewState, page_size: int) -> ViewState:
    if page_size < 1:
        raise ValueError(f"page_size must be a positive integer, got {page_size}")
    if page_size == state.page_size:
        return state
    return replace(state, page_size=page_size, current_page=1)


def clamp_page(state: ViewState, filtered_count: int) -> ViewState:
    """Pull ``current_page`` back into ``[1, total pages]`` for ``filtered_count`` rows."""
    last_page = total_pages(filtered_count, state.page_size)
    page = min(max(state.current_page, 1), last_page)
    if page == state.current_page:
        return state
    return replace(state, current_page=page)


def go_to_page(state: ViewState, page: int, filtered_count: int) -> ViewState:
    return clamp_page(replace(state, current_page=page), filtered_count)


def next_page(state: ViewState, filtered_count: int) -> ViewState:
    return go_to_page(state, state.current_page + 1, filtered_count)


def previous_page(state: ViewState, filtered_count: int) -> ViewState:
    return go_to_page(state, state.current_page - 1, filtered_count)


def reset_for_new_search(state: ViewState) -> ViewState:
    """Fresh defaults for a new submission; only the chosen page size carries over."""
    return ViewState(page_size=state.page_size)
