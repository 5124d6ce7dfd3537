"""Issue tracker client: one saved-filter search, normalized to Tickets."""

import logging
from typing import Optional

import httpx

from dealboard.config import TrackerConfig
from dealboard.http_client import client_scope
from dealboard.models.report import TicketReport

from .parsers import normalize_issue, search_fields

logger = logging.getLogger(__name__)


class TrackerClient:
    """Runs the configured saved filter against the tracker's JQL search endpoint."""

    SEARCH_PATH = "/rest/api/3/search/jql"

    DEFAULT_HEADERS = {
        "Accept": "application/json",
        "Content-Type": "application/json",
    }

    def __init__(self, config: TrackerConfig, client: Optional[httpx.Client] = None):
        self.config = config
        self._client = client

    def _search(self, client: httpx.Client) -> dict:
        """POST the filter query; returns decoded JSON."""
        c = self.config
        response = client.post(
            c.base_url.rstrip("/") + self.SEARCH_PATH,
            auth=(c.email, c.api_token),
            headers=self.DEFAULT_HEADERS,
            json={
                "jql": f"filter={c.filter_id}",
                "maxResults": c.max_results,
                "fields": search_fields(c.due_date_field),
            },
        )
        response.raise_for_status()
        return response.json()

    def fetch_tickets(self) -> TicketReport:
        """Fetch and normalize tickets; failures come back as an error report."""
        if not self.config.is_configured:
            return TicketReport(configured=False, error="Missing issue tracker configuration")

        try:
            with client_scope(self._client) as client:
                payload = self._search(client)
        except httpx.HTTPStatusError as e:
            detail = e.response.text[:300]
            logger.warning("Issue tracker API error %s: %s", e.response.status_code, detail)
            return TicketReport(
                configured=True,
                error=f"Issue tracker API error: {e.response.status_code}",
                error_detail=detail,
            )
        except (httpx.RequestError, ValueError) as e:
            logger.warning("Issue tracker fetch failed: %s", e)
            return TicketReport(
                configured=True,
                error="Failed to fetch issue tracker tickets",
                error_detail=str(e),
            )

        if not isinstance(payload, dict):
            payload = {}
        issues = payload.get("issues") or []
        tickets = [
            normalize_issue(issue, self.config.base_url, self.config.due_date_field)
            for issue in issues
            if isinstance(issue, dict)
        ]
        return TicketReport(
            tickets=tickets,
            total=payload.get("total") or len(tickets),
            configured=True,
        )
