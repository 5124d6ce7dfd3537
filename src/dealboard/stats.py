"""Headline numbers for the dashboard cards."""

from collections import Counter
from typing import Optional

from pydantic import BaseModel, Field

from dealboard.models.opportunity import Opportunity
from dealboard.models.ticket import Ticket

CLOSED_STATUSES = ("Done", "Closed", "Resolved")
HIGH_PRIORITIES = ("Highest", "High", "Critical", "Blocker")


class BucketStats(BaseModel):
    count: int = 0
    amount: float = 0.0
    amount_display: str = "$0"


class DashboardStats(BaseModel):
    """Ticket counts and per-bucket opportunity totals."""

    tickets_total: int = 0
    tickets_open: int = 0
    tickets_high_priority: int = 0
    tickets_by_status: dict[str, int] = Field(default_factory=dict)
    buckets: dict[str, BucketStats] = Field(default_factory=dict)


def format_amount(amount: Optional[float]) -> str:
    """$0, $350K, $1.2M."""
    if not amount:
        return "$0"
    if amount >= 1_000_000:
        return f"${amount / 1_000_000:.1f}M"
    return f"${amount / 1000:.0f}K"


def summarize(
    tickets: list[Ticket],
    buckets: dict[str, list[Opportunity]],
) -> DashboardStats:
    by_status = Counter(t.status for t in tickets)
    bucket_stats: dict[str, BucketStats] = {}
    for name, opps in buckets.items():
        total = sum(o.amount or 0 for o in opps)
        bucket_stats[name] = BucketStats(
            count=len(opps),
            amount=total,
            amount_display=format_amount(total),
        )
    return DashboardStats(
        tickets_total=len(tickets),
        tickets_open=sum(1 for t in tickets if t.status not in CLOSED_STATUSES),
        tickets_high_priority=sum(1 for t in tickets if t.priority in HIGH_PRIORITIES),
        tickets_by_status=dict(by_status),
        buckets=bucket_stats,
    )
