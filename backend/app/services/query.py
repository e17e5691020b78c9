"""Query service: paginated lookups and aggregates over the record store."""
from typing import Dict, List
from app.models.statistics import DashboardResponse, Statistics
from app.models.transaction import Transaction
from app.services.aggregation import TransactionAggregator
from app.services.filters import TransactionFilter


class TransactionQueryService:
    """Runs filtered queries against a record store."""

    def __init__(self, store, aggregator: TransactionAggregator = None):
        self.store = store
        self.aggregator = aggregator or TransactionAggregator()

    def get_page(self, query: TransactionFilter, page: int = 1, per_page: int = 10) -> List[Transaction]:
        """
        Return one page of matching transactions.

        ``page`` is 1-indexed. Pages past the end are empty.
        """
        if page < 1 or per_page < 1:
            raise ValueError("page and per_page must be >= 1")
        return self.store.find(query, skip=(page - 1) * per_page, limit=per_page)

    def get_statistics(self, query: TransactionFilter) -> Statistics:
        return self.aggregator.summarize(self.store.find(query))

    def get_price_histogram(self, query: TransactionFilter) -> Dict[str, int]:
        return self.aggregator.price_histogram(self.store.find(query))

    def get_category_histogram(self, query: TransactionFilter) -> Dict[str, int]:
        return self.aggregator.category_histogram(self.store.find(query))

    def get_dashboard(self, query: TransactionFilter, page: int = 1, per_page: int = 10) -> DashboardResponse:
        """
        Page plus all three aggregates from a single filter.

        An empty page yields empty aggregates, matching what the dashboard
        shows when it has nothing to list.
        """
        transactions = self.get_page(query, page, per_page)
        if not transactions:
            return DashboardResponse()

        matches = self.store.find(query)
        return DashboardResponse(
            transactions=transactions,
            statistics=self.aggregator.summarize(matches),
            bar_chart=self.aggregator.price_histogram(matches),
            pie_chart=self.aggregator.category_histogram(matches),
        )
