from .transaction import Transaction, TransactionCreate
from .statistics import Statistics, DashboardResponse

__all__ = [
    "Transaction",
    "TransactionCreate",
    "Statistics",
    "DashboardResponse",
]
