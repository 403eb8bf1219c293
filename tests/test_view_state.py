import pytest

from placescout.models import SortDirection, SortField, ViewState
from placescout.view import view_state as reducers


def test_defaults():
    state = ViewState()

    assert state.sort_field is SortField.RATING
    assert state.sort_direction is SortDirection.DESC
    assert state.filter_text == ""
    assert state.current_page == 1
    assert state.page_size == 10


def test_changing_sort_field_on_page_three_resets_to_page_one():
    state = ViewState(current_page=3)

    new_state = reducers.toggle_sort(state, SortField.NAME)

    assert new_state.current_page == 1
    assert new_state.sort_field is SortField.NAME
    assert new_state.sort_direction is SortDirection.DESC


def test_selecting_active_field_flips_direction():
    state = ViewState(sort_field=SortField.REVIEWS, sort_direction=SortDirection.DESC, current_page=2)

    flipped = reducers.toggle_sort(state, SortField.REVIEWS)
    flipped_back = reducers.toggle_sort(flipped, SortField.REVIEWS)

    assert flipped.sort_direction is SortDirection.ASC
    assert flipped.current_page == 1
    assert flipped_back.sort_direction is SortDirection.DESC


def test_new_field_always_starts_descending():
    state = ViewState(sort_field=SortField.NAME, sort_direction=SortDirection.ASC)

    assert reducers.toggle_sort(state, SortField.CATEGORY).sort_direction is SortDirection.DESC


def test_reducers_do_not_mutate_input():
    state = ViewState(current_page=4)
    reducers.toggle_sort(state, SortField.NAME)
    reducers.set_filter_text(state, "pizza")

    assert state == ViewState(current_page=4)


def test_filter_and_page_size_changes_reset_page():
    state = ViewState(current_page=5)

    assert reducers.set_filter_text(state, "gym").current_page == 1
    assert reducers.set_page_size(state, 50).current_page == 1
    assert reducers.set_sort(state, SortField.NAME, SortDirection.ASC).current_page == 1


def test_unchanged_values_keep_the_page():
    state = ViewState(filter_text="gym", page_size=50, current_page=2)

    assert reducers.set_filter_text(state, "gym") is state
    assert reducers.set_page_size(state, 50) is state
    assert reducers.set_sort(state, state.sort_field, state.sort_direction) is state


def test_page_size_must_be_positive():
    with pytest.raises(ValueError):
        reducers.set_page_size(ViewState(), 0)


@pytest.mark.parametrize("page, count, expected", [
    (3, 25, 3),
    (4, 25, 3),
    (0, 25, 1),
    (-1, 25, 1),
    (2, 0, 1),
])
def test_go_to_page_clamps(page, count, expected):
    assert reducers.go_to_page(ViewState(), page, count).current_page == expected


def test_next_and_previous_stop_at_the_ends():
    last = ViewState(current_page=3)
    first = ViewState(current_page=1)

    assert reducers.next_page(last, 25).current_page == 3
    assert reducers.next_page(first, 25).current_page == 2
    assert reducers.previous_page(first, 25).current_page == 1
    assert reducers.previous_page(last, 25).current_page == 2


def test_reset_for_new_search_keeps_page_size_only():
    state = ViewState(
        sort_field=SortField.NAME,
        sort_direction=SortDirection.ASC,
        filter_text="x",
        current_page=3,
        page_size=100,
    )

    assert reducers.reset_for_new_search(state) == ViewState(page_size=100)
