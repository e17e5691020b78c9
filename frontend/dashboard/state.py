"""Dashboard view state and the controller that keeps it in sync with the API."""
import logging
import threading
from typing import Any, Callable, Dict, List, Optional
import httpx
from pydantic import BaseModel, Field
from dashboard.config import settings

logger = logging.getLogger(__name__)

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]


def empty_statistics() -> Dict[str, Any]:
    return {"totalSales": 0, "soldItems": 0, "unsoldItems": 0}


class DashboardState(BaseModel):
    """Filter, page and the last data fetched for them."""

    page: int = 1
    search_term: str = ""
    month: str = settings.default_month
    transactions: List[Dict[str, Any]] = Field(default_factory=list)
    statistics: Dict[str, Any] = Field(default_factory=empty_statistics)
    bar_chart_data: Dict[str, int] = Field(default_factory=dict)
    pie_chart_data: Dict[str, int] = Field(default_factory=dict)


class DashboardController:
    """
    Owns one session's DashboardState.

    Every page/search/month change bumps a generation counter and refetches.
    Responses belonging to an older generation are dropped, so a slow request
    can never overwrite the result of a newer one. Fetch failures are logged
    and the previous data stays in place.
    """

    def __init__(self, client, per_page: Optional[int] = None, bundled: Optional[bool] = None):
        self.client = client
        self.per_page = per_page or settings.per_page
        self.bundled = settings.bundled if bundled is None else bundled
        self.state = DashboardState()
        self._generation = 0
        self._lock = threading.Lock()

    # -- state transitions ---------------------------------------------------

    def set_page(self, page: int) -> DashboardState:
        with self._lock:
            self.state.page = max(1, int(page))
        return self.refresh()

    def next_page(self) -> DashboardState:
        """No upper bound; pages past the end simply come back empty."""
        return self.set_page(self.state.page + 1)

    def previous_page(self) -> DashboardState:
        return self.set_page(self.state.page - 1)

    def set_month(self, month: str) -> DashboardState:
        with self._lock:
            self.state.month = month
        return self.refresh()

    def set_search(self, search_term: str) -> DashboardState:
        with self._lock:
            self.state.search_term = search_term or ""
        return self.refresh()

    def submit_search(self, search_term: str) -> DashboardState:
        """Explicit search submit restarts from the first page."""
        with self._lock:
            self.state.search_term = search_term or ""
            self.state.page = 1
        return self.refresh()

    # -- fetching ------------------------------------------------------------

    def _begin(self):
        with self._lock:
            self._generation += 1
            return self._generation, self.state.page, self.state.search_term, self.state.month

    def _apply(self, generation: int, update: Callable[[DashboardState], None]) -> bool:
        """Run ``update`` only if no newer refresh has started."""
        with self._lock:
            if generation != self._generation:
                logger.debug("Discarding stale response for generation %d", generation)
                return False
            update(self.state)
            return True

    def _fetch(self, label: str, fn: Callable[[], Any]):
        try:
            return True, fn()
        except httpx.HTTPError as e:
            logger.error("Error fetching %s: %s", label, e)
            return False, None

    def refresh(self) -> DashboardState:
        """Fetch data for the current filter and page."""
        generation, page, search, month = self._begin()
        if self.bundled:
            self._refresh_bundled(generation, page, search, month)
        else:
            self._refresh_separate(generation, page, search, month)
        return self.state

    def _refresh_separate(self, generation: int, page: int, search: str, month: str):
        ok, transactions = self._fetch(
            "transactions", lambda: self.client.transactions(page, self.per_page, search, month)
        )
        if not ok:
            return

        def set_transactions(state: DashboardState):
            state.transactions = transactions
            if not transactions:
                state.statistics = empty_statistics()
                state.bar_chart_data = {}
                state.pie_chart_data = {}

        if not self._apply(generation, set_transactions) or not transactions:
            return

        ok, statistics = self._fetch("statistics", lambda: self.client.statistics(month, search))
        if ok:
            self._apply(generation, lambda state: setattr(state, "statistics", statistics))

        ok, bar_chart = self._fetch("bar chart data", lambda: self.client.bar_chart(month, search))
        if ok:
            self._apply(generation, lambda state: setattr(state, "bar_chart_data", bar_chart))

        ok, pie_chart = self._fetch("pie chart data", lambda: self.client.pie_chart(month, search))
        if ok:
            self._apply(generation, lambda state: setattr(state, "pie_chart_data", pie_chart))

    def _refresh_bundled(self, generation: int, page: int, search: str, month: str):
        ok, bundle = self._fetch(
            "dashboard", lambda: self.client.dashboard(page, self.per_page, search, month)
        )
        if not ok:
            return

        def set_bundle(state: DashboardState):
            state.transactions = bundle.get("transactions", [])
            state.statistics = bundle.get("statistics") or empty_statistics()
            state.bar_chart_data = bundle.get("barChart", {})
            state.pie_chart_data = bundle.get("pieChart", {})

        self._apply(generation, set_bundle)
