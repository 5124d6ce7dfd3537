"""Responses handed to the presentation layer."""

from typing import Optional

from pydantic import BaseModel, Field

from dealboard.diagnostics import SheetDiagnostics
from dealboard.models.fetch import FetchAttempt, SourceTag
from dealboard.models.opportunity import Opportunity
from dealboard.models.ticket import Ticket


class OpportunityReport(BaseModel):
    """Opportunities grouped into stage buckets plus how the sheet was obtained."""

    buckets: dict[str, list[Opportunity]] = Field(default_factory=dict)
    totals: dict[str, int] = Field(default_factory=dict)
    source: SourceTag = "none"
    configured: bool = True
    error: Optional[str] = None
    attempts: list[FetchAttempt] = Field(default_factory=list)
    diagnostics: Optional[SheetDiagnostics] = None

    @classmethod
    def empty(
        cls,
        bucket_names: list[str],
        *,
        source: SourceTag = "none",
        configured: bool = True,
        error: Optional[str] = None,
        attempts: Optional[list[FetchAttempt]] = None,
    ) -> "OpportunityReport":
        return cls(
            buckets={name: [] for name in bucket_names},
            totals={name: 0 for name in bucket_names},
            source=source,
            configured=configured,
            error=error,
            attempts=attempts or [],
        )


class TicketReport(BaseModel):
    """Tickets from the saved filter, or an error with empty tickets."""

    tickets: list[Ticket] = Field(default_factory=list)
    total: int = 0
    configured: bool = True
    error: Optional[str] = None
    error_detail: Optional[str] = None


class ConfigStatus(BaseModel):
    """Which integrations have credentials at all, independent of fetch success."""

    tickets_configured: bool
    opportunities_configured: bool
    sheet_strategies: list[str] = Field(
        default_factory=list,
        description="Eligible sheet strategies in resolution order",
    )
