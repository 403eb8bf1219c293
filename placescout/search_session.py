"""
One user's search session: the latest webhook response plus the view over it.

The session owns the mutable bits (current response, current ViewState) and
delegates every derived value to the pure view engine.
"""
from datetime import date
from typing import List, Optional
from loguru import logger

from placescout.clients import PlacesClient
from placescout.exceptions import SearchInputError, WebhookError
from placescout.exporters.csv_exporter import export_csv, export_filename
from placescout.field_resolver import is_places_data, resolve_places
from placescout.models import (
    NonTabularResult,
    Place,
    SearchStats,
    SortField,
    ViewResult,
    ViewState,
    WebhookResponse,
)
from placescout.view import view_state as reducers
from placescout.view.stats import calculate_stats
from placescout.view.view_orchestrator import build_table_view, visible_places


class SearchSession:
    """
    Holds the result of the latest search and the user's view parameters.

    A new submission replaces the response wholesale and resets the view to
    defaults (keeping the page size); ``clear()`` drops everything.
    """

    def __init__(self, client: Optional[PlacesClient] = None, view_state: Optional[ViewState] = None):
        self.client = client or PlacesClient()
        self.view_state = view_state or ViewState()
        self.location = ""
        self.search_term = ""
        self.response: Optional[WebhookResponse] = None
        self.places: Optional[List[Place]] = None
        self.stats: Optional[SearchStats] = None
        self.error: Optional[str] = None
        self.loading = False

    # ------------------------------------------------------------------
    # Submission
    # ------------------------------------------------------------------
    async def submit(self, location: str, search_term: str) -> WebhookResponse:
        """
        Run a search and load its response into the session.

        Raises:
            SearchInputError: location or search term is blank.
            WebhookError: the webhook could not be reached. The previous
                response is kept and ``error`` holds the message.
        """
        if not location.strip() or not search_term.strip():
            self.error = "Please fill in both location and search term"
            raise SearchInputError(self.error)

        self.loading = True
        self.error = None
        try:
            response = await self.client.search(location, search_term, self.view_state.page_size)
        except WebhookError as e:
            self.error = str(e)
            raise
        finally:
            self.loading = False

        self.location = location
        self.search_term = search_term
        self.load_response(response)
        return response

    def load_response(self, response: WebhookResponse) -> None:
        """Replace the current data with ``response`` and reset the view."""
        self.response = response
        if is_places_data(response.data):
            self.places = resolve_places(response.data)
            self.stats = calculate_stats(self.places)
            self.view_state = reducers.reset_for_new_search(self.view_state)
            logger.info(f"Loaded {len(self.places)} places (HTTP {response.status})")
        else:
            self.places = None
            self.stats = None
            logger.info(f"Loaded non-tabular response (HTTP {response.status})")

    def clear(self) -> None:
        self.response = None
        self.places = None
        self.stats = None
        self.error = None
        self.view_state = reducers.reset_for_new_search(self.view_state)

    # ------------------------------------------------------------------
    # Derived view
    # ------------------------------------------------------------------
    def view(self) -> Optional[ViewResult]:
        """Current renderable view, or None before the first search."""
        if self.response is None:
            return None
        if self.places is None:
            return NonTabularResult(data=self.response.data)
        return build_table_view(self.places, self.view_state)

    def _filtered_count(self) -> int:
        return len(visible_places(self.places or [], self.view_state))

    # ------------------------------------------------------------------
    # User actions
    # ------------------------------------------------------------------
    def sort_by(self, sort_field: SortField) -> ViewState:
        self.view_state = reducers.toggle_sort(self.view_state, sort_field)
        return self.view_state

    def set_filter_text(self, filter_text: str) -> ViewState:
        self.view_state = reducers.set_filter_text(self.view_state, filter_text)
        return self.view_state

    def set_page_size(self, page_size: int) -> ViewState:
        self.view_state = reducers.set_page_size(self.view_state, page_size)
        return self.view_state

    def go_to_page(self, page: int) -> ViewState:
        self.view_state = reducers.go_to_page(self.view_state, page, self._filtered_count())
        return self.view_state

    def next_page(self) -> ViewState:
        self.view_state = reducers.next_page(self.view_state, self._filtered_count())
        return self.view_state

    def previous_page(self) -> ViewState:
        self.view_state = reducers.previous_page(self.view_state, self._filtered_count())
        return self.view_state

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------
    def export_csv(self) -> Optional[str]:
        """CSV of the current filtered/sorted view; None when there are no places."""
        if self.places is None:
            return None
        return export_csv(self.places, self.view_state)

    def export_filename(self, day: Optional[date] = None) -> str:
        return export_filename(self.search_term, self.location, day)

    def response_json(self) -> Optional[str]:
        return self.response.to_json() if self.response else None
