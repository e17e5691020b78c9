"""Seed ingestion: fetch the remote product feed and bulk-insert it."""
import logging
from typing import List, Optional
import httpx
from pydantic import ValidationError
from app.config import settings
from app.models.transaction import TransactionCreate
from app.utils.errors import InvalidFormat, UpstreamFetchFailure

logger = logging.getLogger(__name__)


class SeedIngestionService:
    """Loads the seed dataset into a record store. Append-only, no dedup."""

    def __init__(
        self,
        store,
        seed_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.store = store
        self.seed_url = seed_url or settings.seed_url
        self.timeout = timeout if timeout is not None else settings.http_timeout
        self.transport = transport

    async def fetch(self) -> list:
        """GET the seed URL and return the decoded JSON array."""
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                resp = await client.get(self.seed_url)
                resp.raise_for_status()
        except httpx.HTTPError as e:
            logger.error("Seed fetch from %s failed: %s", self.seed_url, e)
            raise UpstreamFetchFailure(str(e)) from e

        try:
            data = resp.json()
        except ValueError as e:
            raise InvalidFormat("Invalid data format received from the API") from e

        if not isinstance(data, list):
            raise InvalidFormat("Invalid data format received from the API")
        return data

    def parse(self, items: list) -> List[TransactionCreate]:
        """Validate every element; one bad element rejects the whole payload."""
        transactions = []
        for index, item in enumerate(items):
            try:
                transactions.append(TransactionCreate.model_validate(item))
            except ValidationError as e:
                raise InvalidFormat(f"Invalid record at index {index}: {e.errors()[0]['msg']}") from e
        return transactions

    async def run(self) -> int:
        """Fetch, validate and insert. Returns the number of inserted records."""
        logger.info("Seeding transactions from %s", self.seed_url)
        transactions = self.parse(await self.fetch())
        count = self.store.add_transactions(transactions)
        logger.info("Seeded %d transactions", count)
        return count
