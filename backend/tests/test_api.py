"""Tests for API endpoints."""
import pytest
from fastapi.testclient import TestClient
from app.config import settings
from app.main import app
from app.services.ingestion import SeedIngestionService
from app.utils.errors import InvalidFormat, UpstreamFetchFailure

client = TestClient(app)


def test_root_endpoint():
    """Test root endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    assert "message" in response.json()


def test_initialize_success(store, make_record, monkeypatch):
    async def fake_fetch(self):
        return [make_record("Backpack"), make_record("Shirt")]

    monkeypatch.setattr(SeedIngestionService, "fetch", fake_fetch)

    response = client.get("/initialize")

    assert response.status_code == 200
    assert response.text == "Data fetched and saved successfully"
    assert store.count() == 2


@pytest.mark.parametrize(
    "error",
    [
        InvalidFormat("Invalid data format received from the API"),
        UpstreamFetchFailure("connection refused"),
    ],
)
def test_initialize_failure(store, monkeypatch, error):
    async def fake_fetch(self):
        raise error

    monkeypatch.setattr(SeedIngestionService, "fetch", fake_fetch)

    response = client.get("/initialize")

    assert response.status_code == 500
    assert response.text == f"Error fetching data: {error.message}"
    assert store.count() == 0


def test_transactions_defaults_to_march(seeded_store):
    response = client.get("/transactions")
    assert response.status_code == 200
    data = response.json()
    assert [tx["title"] for tx in data] == ["Backpack", "Gold Ring", "Silver Ring", "Monitor"]
    first = data[0]
    assert set(first.keys()) == {"id", "title", "description", "price", "dateOfSale", "category", "sold"}
    assert first["dateOfSale"].startswith("2022-03-01T08:00:00")


def test_transactions_pagination(seeded_store):
    response = client.get("/transactions", params={"page": 2, "perPage": 3, "month": "March"})
    assert response.status_code == 200
    assert [tx["title"] for tx in response.json()] == ["Monitor"]

    response = client.get("/transactions", params={"page": 5, "perPage": 3, "month": "March"})
    assert response.status_code == 200
    assert response.json() == []


def test_transactions_search(seeded_store):
    response = client.get("/transactions", params={"search": "ring", "month": "March"})
    assert [tx["title"] for tx in response.json()] == ["Gold Ring", "Silver Ring"]

    response = client.get("/transactions", params={"search": "300", "month": "April"})
    assert [tx["title"] for tx in response.json()] == ["Jacket"]


@pytest.mark.parametrize("path", ["/transactions", "/statistics", "/barchart", "/piechart", "/dashboard"])
def test_invalid_month_is_400(seeded_store, path):
    response = client.get(path, params={"month": "Smarch"})
    assert response.status_code == 400
    assert response.text == "Invalid month provided."


@pytest.mark.parametrize("path", ["/barchart", "/piechart"])
def test_legacy_chart_fallback(seeded_store, monkeypatch, path):
    monkeypatch.setattr(settings, "legacy_chart_month_fallback", True)

    response = client.get(path, params={"month": "Smarch"})

    assert response.status_code == 200
    # January has no data in the fixture
    assert sum(response.json().values()) == 0


@pytest.mark.parametrize("params", [{"page": 0}, {"perPage": 0}, {"page": "two"}])
def test_bad_pagination_is_400(seeded_store, params):
    response = client.get("/transactions", params=params)
    assert response.status_code == 400
    assert response.headers["content-type"].startswith("text/plain")


def test_statistics(seeded_store):
    response = client.get("/statistics", params={"month": "March", "search": ""})
    assert response.status_code == 200
    assert response.json() == {"totalSales": 1349, "soldItems": 2, "unsoldItems": 2}

    response = client.get("/statistics", params={"month": "December"})
    assert response.json() == {"totalSales": 0, "soldItems": 0, "unsoldItems": 0}


def test_barchart(seeded_store):
    response = client.get("/barchart", params={"month": "March"})
    assert response.status_code == 200
    data = response.json()
    assert list(data.keys())[0] == "0-100"
    assert list(data.keys())[-1] == "901-above"
    assert data["0-100"] == 1
    assert data["101-200"] == 2
    assert data["901-above"] == 1
    assert sum(data.values()) == 4


def test_piechart(seeded_store):
    response = client.get("/piechart", params={"month": "March", "search": "ring"})
    assert response.status_code == 200
    assert response.json() == {"jewelery": 2}


def test_dashboard(seeded_store):
    response = client.get("/dashboard", params={"month": "March", "perPage": 2})
    assert response.status_code == 200
    data = response.json()
    assert [tx["title"] for tx in data["transactions"]] == ["Backpack", "Gold Ring"]
    assert data["statistics"] == {"totalSales": 1349, "soldItems": 2, "unsoldItems": 2}
    assert sum(data["barChart"].values()) == 4
    assert data["pieChart"]["jewelery"] == 2


def test_store_failure_is_500(store, monkeypatch):
    def broken_find(*args, **kwargs):
        from app.utils.errors import StoreFailure
        raise StoreFailure("database is locked")

    monkeypatch.setattr(store, "find", broken_find)

    response = client.get("/statistics", params={"month": "March"})
    assert response.status_code == 500
    assert response.text == "database is locked"


@pytest.mark.parametrize(
    "params,expected",
    [
        ({"page": 10**18, "perPage": 10}, []),
        ({"page": 1, "perPage": 10**20}, ["Backpack", "Gold Ring", "Silver Ring", "Monitor"]),
    ],
)
def test_huge_pagination_values(seeded_store, params, expected):
    response = client.get("/transactions", params={**params, "month": "March"})
    assert response.status_code == 200
    assert [tx["title"] for tx in response.json()] == expected


def test_dashboard_huge_page_is_empty(seeded_store):
    response = client.get("/dashboard", params={"page": 10**18, "month": "March"})
    assert response.status_code == 200
    assert response.json()["transactions"] == []


def test_whole_number_total_has_no_decimal_point(seeded_store):
    response = client.get("/statistics", params={"month": "March"})
    assert '"totalSales":1349,' in response.text.replace(" ", "")
    assert isinstance(response.json()["totalSales"], int)


def test_port_is_configurable(monkeypatch):
    monkeypatch.setenv("PORT", "5123")
    assert type(settings)().port == 5123
