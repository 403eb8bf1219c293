import json

import numpy as np
import pytest

from placescout.field_resolver import is_places_data, is_tabular_record, resolve_place, resolve_places
from placescout.models import OpeningHours, Place, ViewState
from placescout.view.view_orchestrator import build_view


def test_alternate_keys_resolve_and_classify_as_tabular():
    raw = {"name": "X", "rating": 3, "address": "A"}

    place = resolve_place(raw)

    assert place.title == "X"
    assert place.total_score == 3
    assert place.address == "A"
    assert is_places_data([raw]) is True


def test_primary_key_wins_over_alternate():
    place = resolve_place({"title": "T", "name": "N", "totalScore": 4.0, "rating": 1.0})

    assert place.title == "T"
    assert place.total_score == 4.0


@pytest.mark.parametrize("empty", [None, "", float("nan")])
def test_empty_primary_falls_back_to_alternate(empty):
    place = resolve_place({"title": empty, "name": "N", "categoryName": empty, "category": "Gym"})

    assert place.title == "N"
    assert place.category_name == "Gym"


def test_location_and_region_fallbacks():
    place = resolve_place({"title": "A", "address": "B", "location": "Austin", "region": "TX"})

    assert place.city == "Austin"
    assert place.state == "TX"


def test_missing_fields_take_documented_defaults():
    place = resolve_place({"title": "Only a title"})

    assert place.category_name == ""
    assert place.address == ""
    assert place.total_score is None
    assert place.reviews_count == 0
    assert place.website is None
    assert place.city is None
    assert place.permanently_closed is False
    assert place.temporarily_closed is False
    assert place.opening_hours == []


def test_numeric_values_are_coerced():
    place = resolve_place({
        "title": "A",
        "totalScore": "4.5",
        "reviewsCount": np.int64(12),
        "postalCode": 10001.0,
    })

    assert place.total_score == 4.5
    assert place.reviews_count == 12
    assert place.postal_code == "10001"


@pytest.mark.parametrize(
    "bad",
    ["n/a", "", float("nan"), True, {"score": 4}, 10**400, float("inf"), "Infinity", "-inf", "1e400"],
)
def test_unparseable_rating_counts_as_absent(bad):
    place = resolve_place({"title": "A", "totalScore": bad, "reviewsCount": bad})

    assert place.total_score is None
    assert place.reviews_count == 0


def test_closure_flags_accept_strings():
    place = resolve_place({"title": "A", "permanentlyClosed": "false", "temporarilyClosed": "TRUE"})

    assert place.permanently_closed is False
    assert place.temporarily_closed is True


def test_opening_hours_are_parsed():
    place = resolve_place({
        "title": "A",
        "openingHours": [{"day": "Monday", "hours": "9 AM-5 PM"}, {"hours": "no day"}, "junk"],
    })

    assert place.opening_hours == [OpeningHours(day="Monday", hours="9 AM-5 PM")]


def test_non_mapping_record_resolves_to_empty_place():
    assert resolve_place("not a record") == Place()
    assert resolve_place(None) == Place()
    assert is_tabular_record(42) is False


def test_raw_mapping_is_copied():
    raw = {"title": "A", "address": "B", "extra": [1, 2]}

    place = resolve_place(raw)

    assert place.raw == raw
    assert place.raw is not raw


def test_resolve_places_keeps_order(raw_places):
    titles = [p.title for p in resolve_places(raw_places)]

    assert titles == ["Joe's Pizza", "Brooklyn Bagels", "old diner"]


@pytest.mark.parametrize(
    "payload",
    [
        [],
        "plain text body",
        {"title": "A", "address": "B"},
        [{"title": "A"}],
        [{"address": "B"}],
        [{"title": "", "address": "B"}],
        [1, 2, 3],
        None,
    ],
)
def test_non_tabular_payloads(payload):
    assert is_places_data(payload) is False


def test_one_qualifying_record_is_enough():
    assert is_places_data([{"foo": 1}, {"name": "A", "address": "B"}]) is True


def test_resolution_never_produces_nan():
    place = resolve_place({"title": "A", "totalScore": np.float64("nan")})

    assert place.total_score is None


@pytest.mark.parametrize("payload", [
    '[{"title": "A", "address": "B", "reviewsCount": 1e400}]',
    '[{"title": "A", "address": "B", "reviewsCount": "Infinity"}]',
    '[{"title": "A", "address": "B", "totalScore": 1' + "0" * 400 + "}]",
])
def test_out_of_range_numbers_in_json_degrade_to_defaults(payload):
    result = build_view(json.loads(payload), ViewState())

    place = result.displayed_page[0]
    assert place.total_score is None
    assert place.reviews_count == 0
