"""Normalized issue-tracker ticket model."""

from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Ticket(BaseModel):
    """Issue tracker ticket reduced to the fields the dashboard shows."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str
    key: str
    summary: str = ""
    status: str = "Unknown"
    priority: str = "None"
    assignee: Optional[str] = None
    reporter: str = "Unknown"
    owner: Optional[str] = None
    created: str = ""
    updated: str = ""
    due_date: Optional[str] = None
    type: str = "Task"
    url: str = ""
