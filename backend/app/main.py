"""FastAPI main application."""
import logging
from typing import Dict, List
from fastapi import FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from app.config import settings
from app.models.statistics import DashboardResponse, Statistics
from app.models.transaction import Transaction
from app.services.filters import build_filter
from app.services.ingestion import SeedIngestionService
from app.services.query import TransactionQueryService
from app.storage.database import get_db
from app.utils.errors import DashboardError

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name, debug=settings.debug)

# Allow the dashboard frontend to call the API
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(DashboardError)
async def dashboard_error_handler(request: Request, exc: DashboardError):
    """Every service failure becomes a plain-text response."""
    if exc.status_code >= 500:
        logger.error("%s on %s: %s", type(exc).__name__, request.url.path, exc.message)
    else:
        logger.warning("%s on %s: %s", type(exc).__name__, request.url.path, exc.message)
    return PlainTextResponse(exc.message, status_code=exc.status_code)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed query parameters answer 400 like the other client errors."""
    errors = exc.errors()
    first = errors[0] if errors else {}
    field = ".".join(str(part) for part in first.get("loc", ())[1:])
    message = f"Invalid parameter {field}: {first.get('msg', 'invalid value')}"
    logger.warning("Bad request on %s: %s", request.url.path, message)
    return PlainTextResponse(message, status_code=400)


def _query_service() -> TransactionQueryService:
    return TransactionQueryService(get_db())


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": settings.app_name, "version": "1.0.0"}


@app.get("/initialize", response_class=PlainTextResponse)
async def initialize():
    """
    Fetch the seed dataset and append it to the record store.

    Every failure, including a malformed payload, answers 500.
    """
    service = SeedIngestionService(get_db())
    try:
        await service.run()
    except DashboardError as e:
        logger.error("Error during initialization: %s", e.message)
        return PlainTextResponse(f"Error fetching data: {e.message}", status_code=500)
    return PlainTextResponse("Data fetched and saved successfully")


@app.get("/transactions", response_model=List[Transaction])
async def list_transactions(
    page: int = Query(1, ge=1, description="1-indexed page number"),
    per_page: int = Query(settings.default_per_page, ge=1, alias="perPage", description="Page size"),
    search: str = Query("", description="Title/description substring or exact price"),
    month: str = Query(settings.default_month, description="English month name"),
):
    """
    One page of transactions sold in ``month`` (any year) matching ``search``.
    """
    query = build_filter(month, search)
    return _query_service().get_page(query, page, per_page)


@app.get("/statistics", response_model=Statistics)
async def statistics(
    month: str = Query(settings.default_month),
    search: str = Query(""),
):
    """Total sales and sold/unsold counts for the filter."""
    query = build_filter(month, search)
    return _query_service().get_statistics(query)


@app.get("/barchart", response_model=Dict[str, int])
async def barchart(
    month: str = Query(settings.default_month),
    search: str = Query(""),
):
    """Price histogram over ten fixed buckets."""
    query = build_filter(month, search, strict=not settings.legacy_chart_month_fallback)
    return _query_service().get_price_histogram(query)


@app.get("/piechart", response_model=Dict[str, int])
async def piechart(
    month: str = Query(settings.default_month),
    search: str = Query(""),
):
    """Transaction count per category."""
    query = build_filter(month, search, strict=not settings.legacy_chart_month_fallback)
    return _query_service().get_category_histogram(query)


@app.get("/dashboard", response_model=DashboardResponse)
async def dashboard(
    page: int = Query(1, ge=1),
    per_page: int = Query(settings.default_per_page, ge=1, alias="perPage"),
    search: str = Query(""),
    month: str = Query(settings.default_month),
):
    """Page and all aggregates in one response."""
    query = build_filter(month, search)
    return _query_service().get_dashboard(query, page, per_page)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
