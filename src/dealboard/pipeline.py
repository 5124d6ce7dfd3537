"""Pipeline orchestration: resolve sheet -> records -> stage buckets, plus tickets."""

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
from typing import Optional

import httpx
from pydantic import BaseModel, Field

from dealboard.config import DashboardConfig
from dealboard.diagnostics import inspect_rows
from dealboard.filtering import classify_buckets
from dealboard.http_client import client_scope
from dealboard.models.report import ConfigStatus, OpportunityReport, TicketReport
from dealboard.parsing.csv_text import rows_to_records
from dealboard.sources import SheetResolver
from dealboard.stats import DashboardStats, summarize
from dealboard.tracker import TrackerClient

logger = logging.getLogger(__name__)


class Dashboard(BaseModel):
    """Both datasets from one refresh."""

    tickets: TicketReport
    opportunities: OpportunityReport
    stats: DashboardStats
    refreshed_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


def get_opportunities(
    config: DashboardConfig,
    *,
    resolver: Optional[SheetResolver] = None,
    client: Optional[httpx.Client] = None,
) -> OpportunityReport:
    """
    Resolve the sheet and bucket its records by stage.
    Never raises: failures come back as empty buckets with source/error set.
    """
    bucket_names = list(config.buckets)
    try:
        with client_scope(client) as http:
            resolver = resolver or SheetResolver.for_config(config.sheet, client=http)
            configured = bool(resolver.eligible())
            resolution = resolver.resolve()
    except Exception as e:
        logger.exception("Sheet resolution crashed")
        return OpportunityReport.empty(
            bucket_names,
            source="error",
            error=f"Failed to fetch sheet data: {e}",
        )

    result = resolution.result
    if not result.ok:
        return OpportunityReport.empty(
            bucket_names,
            source=result.source,
            configured=configured,
            error=result.error,
            attempts=resolution.attempts,
        )

    try:
        records = rows_to_records(result.rows)
        buckets = classify_buckets(
            records,
            config.buckets,
            config.access_keywords,
            org_url=config.sheet.org_url,
            id_prefix=config.sheet.id_prefix,
        )
    except Exception as e:
        logger.exception("Classification of %d rows failed", len(result.rows))
        return OpportunityReport.empty(
            bucket_names,
            source="error",
            error=f"Failed to process sheet data: {e}",
            attempts=resolution.attempts,
        )

    report = OpportunityReport(
        buckets=buckets,
        totals={name: len(opps) for name, opps in buckets.items()},
        source=result.source,
        configured=True,
        attempts=resolution.attempts,
    )
    if not any(buckets.values()):
        logger.info("No records matched any bucket; attaching sheet diagnostics")
        report.diagnostics = inspect_rows(result.rows, config.sheet.id_prefix)
    return report


def get_tickets(config: DashboardConfig, *, client: Optional[httpx.Client] = None) -> TicketReport:
    try:
        with client_scope(client) as http:
            return TrackerClient(config.tracker, client=http).fetch_tickets()
    except Exception as e:
        logger.exception("Ticket fetch crashed")
        return TicketReport(configured=config.tracker.is_configured, error=f"Failed to fetch tickets: {e}")


def get_config_status(config: DashboardConfig) -> ConfigStatus:
    """Credential presence only; performs no network calls."""
    strategies = SheetResolver.for_config(config.sheet).eligible()
    return ConfigStatus(
        tickets_configured=config.tracker.is_configured,
        opportunities_configured=bool(strategies),
        sheet_strategies=strategies,
    )


def refresh_dashboard(config: DashboardConfig) -> Dashboard:
    """Fetch tickets and opportunities side by side; the two share no state."""
    with ThreadPoolExecutor(max_workers=2) as pool:
        tickets_future = pool.submit(get_tickets, config)
        opps_future = pool.submit(get_opportunities, config)
        tickets = tickets_future.result()
        opportunities = opps_future.result()
    return Dashboard(
        tickets=tickets,
        opportunities=opportunities,
        stats=summarize(tickets.tickets, opportunities.buckets),
    )
