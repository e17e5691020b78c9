"""Aggregate views over a filtered set of transactions."""
from collections import defaultdict
from typing import Dict, List, Optional, Tuple
from app.models.statistics import Statistics
from app.models.transaction import Transaction

# (label, inclusive upper bound); None marks the catch-all bucket
PRICE_BUCKETS: List[Tuple[str, Optional[float]]] = [
    ("0-100", 100),
    ("101-200", 200),
    ("201-300", 300),
    ("301-400", 400),
    ("401-500", 500),
    ("501-600", 600),
    ("601-700", 700),
    ("701-800", 800),
    ("801-900", 900),
    ("901-above", None),
]


def price_bucket(price: float) -> str:
    """Label of the smallest bucket whose upper bound is >= price."""
    for label, upper in PRICE_BUCKETS:
        if upper is None or price <= upper:
            return label
    # unreachable, the last bucket has no upper bound
    raise AssertionError("price buckets must end with a catch-all")


class TransactionAggregator:
    """Computes summary totals and histograms from transactions."""

    def summarize(self, transactions: List[Transaction]) -> Statistics:
        """
        Sum prices and count sold/unsold items.

        Returns zero-valued statistics for an empty list.
        """
        if not transactions:
            return Statistics()

        total_sales = sum(tx.price for tx in transactions)
        # whole-number totals go out as 1249, not 1249.0
        if float(total_sales).is_integer():
            total_sales = int(total_sales)
        sold_items = len([tx for tx in transactions if tx.sold])
        return Statistics(
            total_sales=total_sales,
            sold_items=sold_items,
            unsold_items=len(transactions) - sold_items,
        )

    def price_histogram(self, transactions: List[Transaction]) -> Dict[str, int]:
        """Count transactions per price bucket. All ten labels are present, in order."""
        counts = {label: 0 for label, _ in PRICE_BUCKETS}
        for tx in transactions:
            counts[price_bucket(tx.price)] += 1
        return counts

    def category_histogram(self, transactions: List[Transaction]) -> Dict[str, int]:
        """Count transactions per exact category value."""
        counts: Dict[str, int] = defaultdict(int)
        for tx in transactions:
            counts[tx.category] += 1
        return dict(counts)
