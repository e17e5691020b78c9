"""HTTP client for the transaction dashboard API."""
from typing import Any, Dict, List, Optional
import httpx
from dashboard.config import settings


class DashboardClient:
    """Thin synchronous wrapper over the five read endpoints.

    Non-2xx answers raise ``httpx.HTTPStatusError``.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._client = httpx.Client(
            base_url=base_url or settings.api_url,
            timeout=timeout if timeout is not None else settings.timeout,
            transport=transport,
        )

    def _get(self, path: str, params: Optional[dict] = None) -> Any:
        resp = self._client.get(path, params=params)
        resp.raise_for_status()
        return resp.json()

    def transactions(self, page: int, per_page: int, search: str, month: str) -> List[Dict[str, Any]]:
        return self._get(
            "/transactions",
            {"page": page, "perPage": per_page, "search": search, "month": month},
        )

    def statistics(self, month: str, search: str) -> Dict[str, Any]:
        return self._get("/statistics", {"month": month, "search": search})

    def bar_chart(self, month: str, search: str) -> Dict[str, int]:
        return self._get("/barchart", {"month": month, "search": search})

    def pie_chart(self, month: str, search: str) -> Dict[str, int]:
        return self._get("/piechart", {"month": month, "search": search})

    def dashboard(self, page: int, per_page: int, search: str, month: str) -> Dict[str, Any]:
        return self._get(
            "/dashboard",
            {"page": page, "perPage": per_page, "search": search, "month": month},
        )

    def close(self):
        self._client.close()
