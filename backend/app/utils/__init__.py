from .errors import DashboardError, InvalidFormat, InvalidMonth, UpstreamFetchFailure, StoreFailure
from .timestamp import parse_timestamp, to_utc

__all__ = [
    "DashboardError",
    "InvalidFormat",
    "InvalidMonth",
    "UpstreamFetchFailure",
    "StoreFailure",
    "parse_timestamp",
    "to_utc",
]
