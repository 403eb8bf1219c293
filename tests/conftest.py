import pytest

from placescout.field_resolver import resolve_places


@pytest.fixture()
def raw_places():
    """A small, deliberately uneven payload as the webhook might return it."""
    return [
        {
            "title": "Joe's Pizza",
            "categoryName": "Restaurant",
            "totalScore": 4.5,
            "reviewsCount": 120,
            "address": "1 Main St",
            "city": "NYC",
            "state": "NY",
            "website": "http://x.com",
            "permanentlyClosed": False,
            "temporarilyClosed": False,
        },
        {
            "name": "Brooklyn Bagels",
            "category": "Bakery",
            "rating": 4.8,
            "reviews": 300,
            "address": "22 Court St",
            "location": "Brooklyn",
            "region": "NY",
            "phone": "+1 718-555-0100",
            "permanentlyClosed": False,
            "temporarilyClosed": True,
        },
        {
            "title": "old diner",
            "categoryName": "Diner",
            "address": "9 Elm Rd",
            "city": "Queens",
            "permanentlyClosed": True,
            "temporarilyClosed": False,
        },
    ]


@pytest.fixture()
def places(raw_places):
    return resolve_places(raw_places)
