"""Tests for the dashboard HTTP client and chart helpers."""
import random
import httpx
import pytest
from dashboard.charts import bar_chart_figure, pie_chart_figure, statistics_markdown, table_rows
from dashboard.client import DashboardClient


def _client(handler):
    return DashboardClient(base_url="http://api.test", timeout=5, transport=httpx.MockTransport(handler))


def test_transactions_sends_camel_case_params():
    seen = {}

    def handler(request):
        seen["path"] = request.url.path
        seen["params"] = dict(request.url.params)
        return httpx.Response(200, json=[])

    assert _client(handler).transactions(2, 10, "ring", "April") == []
    assert seen["path"] == "/transactions"
    assert seen["params"] == {"page": "2", "perPage": "10", "search": "ring", "month": "April"}


@pytest.mark.parametrize(
    "method,path",
    [("statistics", "/statistics"), ("bar_chart", "/barchart"), ("pie_chart", "/piechart")],
)
def test_aggregate_endpoints(method, path):
    def handler(request):
        assert request.url.path == path
        assert request.url.params["month"] == "March"
        return httpx.Response(200, json={"ok": 1})

    assert getattr(_client(handler), method)("March", "") == {"ok": 1}


def test_error_status_raises():
    client = _client(lambda request: httpx.Response(400, text="Invalid month provided."))
    with pytest.raises(httpx.HTTPStatusError):
        client.statistics("Smarch", "")


def test_table_rows():
    rows = table_rows([{"id": "a", "title": "Pack", "description": "d", "price": 50, "category": "bags", "sold": False}])
    assert rows == [["a", "Pack", "d", "$50", "bags", "No"]]


def test_statistics_markdown():
    text = statistics_markdown("March", {"totalSales": 1249, "soldItems": 3, "unsoldItems": 1})
    assert "Statistics for March" in text
    assert "$1249" in text


def test_figures():
    bar = bar_chart_figure({"0-100": 1, "101-200": 2})
    assert list(bar.data[0].y) == [1, 2]

    pie = pie_chart_figure({"bags": 2, "shoes": 1}, rng=random.Random(7))
    colors = list(pie.data[0].marker.colors)
    assert len(colors) == 2
    assert all(c.startswith("#") and len(c) == 7 for c in colors)
