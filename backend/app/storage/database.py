"""Record store for transactions using SQLite."""
import logging
import sqlite3
import uuid
from contextlib import contextmanager
from datetime import datetime
from typing import List, Optional
from app.config import settings
from app.models.transaction import Transaction, TransactionCreate
from app.services.filters import TransactionFilter, contains_casefold
from app.utils.errors import StoreFailure
from app.utils.timestamp import to_utc

logger = logging.getLogger(__name__)

_COLUMNS = "id, title, description, price, date_of_sale, category, sold"

SQLITE_MAX_INT = 2**63 - 1


class TransactionStore:
    """Storage for transactions."""

    def __init__(self, db_path: Optional[str] = None):
        self.db_path = db_path or settings.database_path
        self._init_db()

    def _init_db(self):
        """Initialize database tables."""
        with self._get_conn() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS transactions (
                    id TEXT PRIMARY KEY,
                    title TEXT NOT NULL,
                    description TEXT NOT NULL,
                    price REAL NOT NULL,
                    date_of_sale TEXT NOT NULL,
                    category TEXT NOT NULL,
                    sold INTEGER NOT NULL
                )
            """)
            conn.commit()

    @contextmanager
    def _get_conn(self):
        """Get database connection; any sqlite error surfaces as StoreFailure."""
        try:
            conn = sqlite3.connect(self.db_path)
        except sqlite3.Error as e:
            raise StoreFailure(f"Could not open database: {str(e)}") from e
        conn.row_factory = sqlite3.Row
        conn.create_function("contains_casefold", 2, contains_casefold, deterministic=True)
        try:
            yield conn
        except sqlite3.Error as e:
            conn.rollback()
            raise StoreFailure(str(e)) from e
        finally:
            conn.close()

    def add_transactions(self, transactions: List[TransactionCreate]) -> int:
        """Append transactions in one batch; every record gets a fresh id."""
        rows = [
            (
                str(uuid.uuid4()),
                tx.title,
                tx.description,
                tx.price,
                to_utc(tx.date_of_sale).isoformat(),
                tx.category,
                int(tx.sold),
            )
            for tx in transactions
        ]
        with self._get_conn() as conn:
            conn.executemany(
                f"INSERT INTO transactions ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?)",
                rows,
            )
            conn.commit()
        logger.info("Inserted %d transactions into %s", len(rows), self.db_path)
        return len(rows)

    def find(
        self,
        query: TransactionFilter,
        skip: int = 0,
        limit: Optional[int] = None,
    ) -> List[Transaction]:
        """Return matching transactions in insertion order, optionally sliced."""
        # No table can hold more rows than SQLite's integer range
        if skip >= SQLITE_MAX_INT:
            return []
        if limit is not None:
            limit = min(limit, SQLITE_MAX_INT)

        where, params = query.to_sql()
        sql = f"SELECT {_COLUMNS} FROM transactions WHERE {where} ORDER BY rowid"
        if limit is not None or skip:
            # SQLite needs a LIMIT clause for OFFSET; -1 means unbounded
            sql += " LIMIT ? OFFSET ?"
            params = params + [limit if limit is not None else -1, skip]

        with self._get_conn() as conn:
            rows = conn.execute(sql, params).fetchall()
        return [self._row_to_transaction(row) for row in rows]

    def count(self) -> int:
        """Total number of stored transactions."""
        with self._get_conn() as conn:
            return conn.execute("SELECT COUNT(*) FROM transactions").fetchone()[0]

    @staticmethod
    def _row_to_transaction(row: sqlite3.Row) -> Transaction:
        return Transaction(
            id=row["id"],
            title=row["title"],
            description=row["description"],
            price=row["price"],
            date_of_sale=datetime.fromisoformat(row["date_of_sale"]),
            category=row["category"],
            sold=bool(row["sold"]),
        )


# Global instance
_transaction_store = None


def get_db() -> TransactionStore:
    """Get the record store instance."""
    global _transaction_store
    if _transaction_store is None:
        _transaction_store = TransactionStore()
    return _transaction_store
