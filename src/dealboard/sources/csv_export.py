"""Public CSV export access with per-URL retry."""

import logging
import time
from typing import Callable, Optional
from urllib.parse import quote

import httpx

from dealboard.config import SheetConfig
from dealboard.errors import DealboardError, ShapeMismatch, TransportFailure
from dealboard.http_client import client_scope
from dealboard.models.fetch import FetchResult
from dealboard.parsing.csv_text import parse_rows

from .base import BaseSheetStrategy

logger = logging.getLogger(__name__)

DOCS_BASE = "https://docs.google.com/spreadsheets/d/{sheet_id}"


def looks_like_html(body: str) -> bool:
    """Login pages and interstitials come back as HTML with a 200."""
    head = body.lstrip()[:200].lower()
    return head.startswith("<!doctype html") or head.startswith("<html")


class CsvExportStrategy(BaseSheetStrategy):
    """
    Anonymous CSV export of a link-shared sheet.
    Tries each candidate URL in order; each gets up to csv_attempts tries with
    a fixed csv_retry_delay between them.
    """

    name = "csv"

    DEFAULT_HEADERS = {
        "User-Agent": "Mozilla/5.0 (compatible; dealboard/0.1)",
        "Accept": "text/csv, text/plain, */*",
    }

    def __init__(
        self,
        config: SheetConfig,
        client: Optional[httpx.Client] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        super().__init__(config)
        self._client = client
        self._sleep = sleep

    def probe(self) -> bool:
        return self.config.has_document

    def skip_reason(self) -> str:
        return "no sheet id/gid/tab configured"

    def candidate_urls(self) -> list[str]:
        """Export URLs in preference order."""
        base = DOCS_BASE.format(sheet_id=self.config.sheet_id)
        urls: list[str] = []
        if self.config.gid:
            urls.append(f"{base}/export?format=csv&gid={self.config.gid}")
        if self.config.tab_name:
            urls.append(f"{base}/gviz/tq?tqx=out:csv&sheet={quote(self.config.tab_name)}")
        if self.config.gid:
            urls.append(f"{base}/gviz/tq?tqx=out:csv&gid={self.config.gid}")
        return urls

    def _fetch_csv(self, client: httpx.Client, url: str) -> str:
        """Fetch CSV text from one URL; raises on HTTP error or HTML body."""
        try:
            response = client.get(url, headers=self.DEFAULT_HEADERS)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TransportFailure(f"HTTP {e.response.status_code}") from e
        except httpx.RequestError as e:
            raise TransportFailure(str(e)) from e
        body = response.text
        if looks_like_html(body):
            raise ShapeMismatch("export returned HTML (sheet not shared publicly?)")
        return body

    def _fetch_with_retry(self, client: httpx.Client, url: str) -> str:
        attempts = max(self.config.csv_attempts, 1)
        for attempt in range(1, attempts):
            try:
                return self._fetch_csv(client, url)
            except (TransportFailure, ShapeMismatch) as e:
                logger.warning("CSV export attempt %d/%d failed for %s: %s", attempt, attempts, url, e)
            self._sleep(self.config.csv_retry_delay)
        # Last attempt propagates its error
        return self._fetch_csv(client, url)

    def fetch(self) -> FetchResult:
        errors: list[DealboardError] = []
        header_only: list[list[str]] = []
        with client_scope(self._client) as client:
            for url in self.candidate_urls():
                try:
                    body = self._fetch_with_retry(client, url)
                except (TransportFailure, ShapeMismatch) as e:
                    logger.warning("CSV export gave up on %s: %s", url, e)
                    errors.append(e)
                    continue
                rows = parse_rows(body)
                if len(rows) >= 2:
                    return self._result(rows)
                logger.warning("CSV export %s returned no data rows", url)
                header_only = header_only or rows

        if header_only or not errors:
            return self._result(header_only)
        raise errors[-1]
