"""Live aggregation endpoint source."""

import logging
from typing import Any

import httpx

from asiajobs.collector.base import BaseSource, extract_records

logger = logging.getLogger(__name__)


class LiveSource(BaseSource):
    """Fetch already-flattened job records from the aggregation endpoint."""

    name = "live"

    def __init__(self, url: str, timeout: float = 20.0, transport: httpx.BaseTransport | None = None):
        self.url = url
        self._timeout = timeout
        self._transport = transport

    def fetch(self) -> list[dict[str, Any]]:
        with httpx.Client(timeout=self._timeout, follow_redirects=True, transport=self._transport) as client:
            resp = client.get(self.url, headers={"Cache-Control": "no-store"})
            resp.raise_for_status()
            payload = resp.json()

        records = extract_records(payload)
        logger.info("Fetched %d records from %s", len(records), self.url)
        return records
