"""
Typed data models for the places view engine.
All data structures used throughout the codebase should be defined here.
"""
import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from placescout.config import DEFAULT_PAGE_SIZE


@dataclass
class OpeningHours:
    """One day of a place's opening hours, e.g. ("Monday", "9 AM-5 PM")."""
    day: str
    hours: str


@dataclass
class Place:
    """Canonical business listing produced by the field resolver."""
    title: str = ""
    category_name: str = ""
    address: str = ""
    sub_title: Optional[str] = None
    phone: Optional[str] = None
    total_score: Optional[float] = None  # None means "no rating"
    reviews_count: int = 0
    website: Optional[str] = None
    image_url: Optional[str] = None
    permanently_closed: bool = False
    temporarily_closed: bool = False
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    neighborhood: Optional[str] = None
    opening_hours: List[OpeningHours] = field(default_factory=list)
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @property
    def is_open(self) -> bool:
        return not self.permanently_closed and not self.temporarily_closed


@dataclass(frozen=True)
class SearchStats:
    """Aggregate metrics over the full fetched result set."""
    total_places: int
    avg_rating: float
    open_now: int
    has_website: int


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


class SortField(str, Enum):
    """User-facing sort columns. Each maps onto one Place attribute."""
    NAME = "name"
    CATEGORY = "category"
    RATING = "rating"
    REVIEWS = "reviews"
    LOCATION = "location"

    @property
    def attribute(self) -> str:
        return _SORT_ATTRIBUTES[self]

    @property
    def is_numeric(self) -> bool:
        return self in (SortField.RATING, SortField.REVIEWS)


_SORT_ATTRIBUTES = {
    SortField.NAME: "title",
    SortField.CATEGORY: "category_name",
    SortField.RATING: "total_score",
    SortField.REVIEWS: "reviews_count",
    SortField.LOCATION: "city",
}


@dataclass(frozen=True)
class ViewState:
    """User-controlled parameters driving the displayed slice. Immutable."""
    sort_field: SortField = SortField.RATING
    sort_direction: SortDirection = SortDirection.DESC
    filter_text: str = ""
    current_page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE


@dataclass
class TableView:
    """Result of running the view pipeline over a tabular payload."""
    places: List[Place]  # normalized full set
    stats: Optional[SearchStats]
    displayed_page: List[Place]
    total_filtered_count: int
    total_pages: int
    view_state: ViewState


@dataclass
class NonTabularResult:
    """Payload that does not look like places; callers render it generically."""
    data: Any


ViewResult = Union[TableView, NonTabularResult]


@dataclass
class WebhookResponse:
    """Envelope around one webhook call, whatever the body turned out to be."""
    data: Any
    status: int
    status_text: str
    headers: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def to_json(self) -> str:
        """Pretty-printed JSON of the whole envelope (what "Copy JSON" copies)."""
        return json.dumps(
            {
                "data": self.data,
                "status": self.status,
                "statusText": self.status_text,
                "headers": self.headers,
            },
            indent=2,
        )
