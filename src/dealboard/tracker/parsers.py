"""Parsing utilities for issue tracker search responses."""

from typing import Any, Optional

from dealboard.models.ticket import Ticket

SEARCH_FIELDS = [
    "summary",
    "status",
    "priority",
    "assignee",
    "reporter",
    "creator",
    "created",
    "updated",
    "duedate",
    "issuetype",
]


def _display_name(value: Any) -> Optional[str]:
    """displayName of a user object, None for null/missing users."""
    if isinstance(value, dict):
        return value.get("displayName") or None
    return None


def _name(value: Any) -> Optional[str]:
    if isinstance(value, dict):
        return value.get("name") or None
    return None


def search_fields(due_date_field: str = "") -> list[str]:
    """Field projection for the search request; includes the custom due-date field if set."""
    fields = list(SEARCH_FIELDS)
    if due_date_field and due_date_field not in fields:
        fields.append(due_date_field)
    return fields


def normalize_issue(issue: dict, base_url: str, due_date_field: str = "") -> Ticket:
    """Convert one search result issue to a Ticket."""
    fields = issue.get("fields") or {}
    key = str(issue.get("key") or "")
    reporter = _display_name(fields.get("reporter"))
    owner = _display_name(fields.get("owner")) or reporter
    due = (fields.get(due_date_field) if due_date_field else None) or fields.get("duedate")

    return Ticket(
        id=str(issue.get("id") or ""),
        key=key,
        summary=fields.get("summary") or "",
        status=_name(fields.get("status")) or "Unknown",
        priority=_name(fields.get("priority")) or "None",
        assignee=_display_name(fields.get("assignee")),
        reporter=reporter or "Unknown",
        owner=owner,
        created=fields.get("created") or "",
        updated=fields.get("updated") or "",
        due_date=str(due) if due else None,
        type=_name(fields.get("issuetype")) or "Task",
        url=f"{base_url.rstrip('/')}/browse/{key}" if key else "",
    )
