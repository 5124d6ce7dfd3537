"""Normalized CRM opportunity model."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Record = dict[str, str]
"""One spreadsheet row keyed by whatever header labels the fetch returned."""


class Opportunity(BaseModel):
    """Canonical opportunity built from one sheet record."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str = Field(..., description="18-char canonical id, or row-<index> when none was found")
    name: str = ""
    stage_name: str = ""
    access_method: str = ""
    amount: Optional[float] = None
    close_date: str = ""
    account_name: str = ""
    owner_name: str = ""
    probability: Optional[float] = None
    created_date: str = ""
    last_modified_date: str = ""
    url: str = Field(default="", description="Deep link; empty for synthetic ids")

    @property
    def has_canonical_id(self) -> bool:
        return not self.id.startswith("row-")
