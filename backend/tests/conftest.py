"""Shared fixtures for backend tests."""
import pytest
from app.models.transaction import TransactionCreate
from app.storage import database
from app.storage.database import TransactionStore


def _record(
    title="Item",
    price=10.0,
    date="2022-03-10T10:00:00Z",
    category="electronics",
    sold=True,
    description="A product",
):
    """Seed-format record (camelCase keys)."""
    return {
        "title": title,
        "description": description,
        "price": price,
        "dateOfSale": date,
        "category": category,
        "sold": sold,
    }


@pytest.fixture
def make_record():
    """Factory for seed-format records."""
    return _record


@pytest.fixture
def store(tmp_path, monkeypatch):
    """Empty record store in a temp file, installed as the global instance."""
    store = TransactionStore(str(tmp_path / "transactions.db"))
    monkeypatch.setattr(database, "_transaction_store", store)
    return store


@pytest.fixture
def seeded_store(store):
    """Store holding a small mixed dataset across March and April."""
    records = [
        _record("Backpack", 50, "2022-03-01T08:00:00Z", "men's clothing", True, "Everyday pack"),
        _record("Gold Ring", 150, "2021-03-15T12:00:00Z", "jewelery", False, "Solid gold"),
        _record("Silver Ring", 150, "2022-03-20T12:00:00Z", "jewelery", True, "Sterling silver"),
        _record("Monitor", 999, "2022-03-28T18:30:00Z", "electronics", False, "27 inch display"),
        _record("Jacket", 300, "2022-04-02T09:00:00Z", "women's clothing", True, "Rain jacket"),
    ]
    store.add_transactions([TransactionCreate.model_validate(r) for r in records])
    return store
