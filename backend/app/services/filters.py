"""Month resolution and the (month, search) filter shared by every query."""
import logging
import math
import re
from typing import List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field
from app.utils.errors import InvalidMonth

logger = logging.getLogger(__name__)

MONTHS = {
    "January": 1,
    "February": 2,
    "March": 3,
    "April": 4,
    "May": 5,
    "June": 6,
    "July": 7,
    "August": 8,
    "September": 9,
    "October": 10,
    "November": 11,
    "December": 12,
}

MONTH_NAMES = list(MONTHS.keys())

# Ordinal used by the historical chart endpoints for an unparseable month
LEGACY_FALLBACK_MONTH = 1


def resolve_month(month: str) -> int:
    """Map an English month name to its 1-12 ordinal or raise InvalidMonth."""
    ordinal = MONTHS.get(month)
    if ordinal is None:
        raise InvalidMonth(month)
    return ordinal


def resolve_month_lenient(month: str) -> int:
    """
    Like resolve_month, but also accepts any letter case and three-letter
    abbreviations ("march", "Mar"); anything else falls back to January.
    """
    key = (month or "").strip().casefold()
    for name, ordinal in MONTHS.items():
        if key in (name.casefold(), name[:3].casefold()):
            return ordinal
    logger.warning(
        "Unknown month %r, falling back to %s", month, MONTH_NAMES[LEGACY_FALLBACK_MONTH - 1]
    )
    return LEGACY_FALLBACK_MONTH


_LEADING_NUMBER = re.compile(r"^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def parse_search_number(search: str) -> Optional[float]:
    """
    Return the leading number of the search term ("150 ring" -> 150.0),
    or None when the term does not start with a finite number.
    """
    m = _LEADING_NUMBER.match(search or "")
    if m is None:
        return None
    value = float(m.group(0))
    if not math.isfinite(value):
        return None
    return value


class TransactionFilter(BaseModel):
    """
    Month-of-year plus search predicate.

    A record matches when its sale month equals ``month`` and the search term
    is a case-insensitive substring of the title or description, or, when the
    term is numeric, the price equals it exactly. An empty term matches every
    record of the month.
    """

    model_config = ConfigDict(frozen=True)

    month: int = Field(..., ge=1, le=12)
    search: str = ""

    @property
    def price(self) -> Optional[float]:
        return parse_search_number(self.search)

    def to_sql(self) -> Tuple[str, List]:
        """Build the WHERE clause and parameters for the record store."""
        clauses = ["contains_casefold(title, ?)", "contains_casefold(description, ?)"]
        params: List = [self.month, self.search, self.search]

        price = self.price
        if price is not None:
            clauses.append("price = ?")
            params.append(price)

        where = "CAST(substr(date_of_sale, 6, 2) AS INTEGER) = ? AND (" + " OR ".join(clauses) + ")"
        return where, params


def contains_casefold(haystack: Optional[str], needle: Optional[str]) -> bool:
    """Case-insensitive literal substring test (registered as an SQL function)."""
    if haystack is None:
        haystack = ""
    return (needle or "").casefold() in haystack.casefold()


def build_filter(month: str, search: str = "", strict: bool = True) -> TransactionFilter:
    """
    Single entry point for turning request parameters into a filter.

    ``strict=False`` keeps the historical chart behaviour of falling back to
    January for an unknown month name.
    """
    ordinal = resolve_month(month) if strict else resolve_month_lenient(month)
    return TransactionFilter(month=ordinal, search=search or "")
