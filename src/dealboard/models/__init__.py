"""Data models for opportunities, tickets, and fetch results."""

from dealboard.models.fetch import FetchAttempt, FetchResult, Resolution, SourceTag
from dealboard.models.opportunity import Opportunity, Record
from dealboard.models.report import ConfigStatus, OpportunityReport, TicketReport
from dealboard.models.ticket import Ticket

__all__ = [
    "ConfigStatus",
    "FetchAttempt",
    "FetchResult",
    "Opportunity",
    "OpportunityReport",
    "Record",
    "Resolution",
    "SourceTag",
    "Ticket",
    "TicketReport",
]
