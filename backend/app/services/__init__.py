from .filters import TransactionFilter, build_filter, resolve_month
from .aggregation import TransactionAggregator
from .query import TransactionQueryService
from .ingestion import SeedIngestionService

__all__ = [
    "TransactionFilter",
    "build_filter",
    "resolve_month",
    "TransactionAggregator",
    "TransactionQueryService",
    "SeedIngestionService",
]
