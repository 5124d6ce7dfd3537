"""Map one sheet record to an Opportunity."""

from dealboard.constants import (
    ACCESS_METHOD_COLUMNS,
    ACCOUNT_COLUMNS,
    AMOUNT_COLUMNS,
    CLOSE_DATE_COLUMNS,
    CREATED_DATE_COLUMNS,
    ID_COLUMNS,
    MODIFIED_DATE_COLUMNS,
    NAME_COLUMNS,
    OWNER_COLUMNS,
    PROBABILITY_COLUMNS,
    STAGE_COLUMNS,
)
from dealboard.models.opportunity import Opportunity, Record
from dealboard.parsing.amounts import parse_amount
from dealboard.parsing.columns import resolve_column
from dealboard.parsing.identifiers import is_valid_id, to_18


def canonical_id(record: Record, id_prefix: str = "006") -> str:
    """18-char id from the id column (strict lookup), or "" if absent/invalid."""
    raw = resolve_column(record, ID_COLUMNS, strict=True).strip()
    if not is_valid_id(raw, id_prefix):
        return ""
    return to_18(raw)


def record_url(org_url: str, opp_id: str) -> str:
    if not opp_id or not org_url:
        return ""
    return f"{org_url.rstrip('/')}/{opp_id}"


def to_opportunity(
    record: Record,
    index: int,
    *,
    org_url: str = "",
    id_prefix: str = "006",
) -> Opportunity:
    """
    Convert a record to an Opportunity.
    Without a valid id the record gets ``row-<index>``; that id depends on
    filter order and is not stable across refreshes.
    """
    opp_id = canonical_id(record, id_prefix)
    return Opportunity(
        id=opp_id or f"row-{index}",
        name=resolve_column(record, NAME_COLUMNS),
        stage_name=resolve_column(record, STAGE_COLUMNS),
        access_method=resolve_column(record, ACCESS_METHOD_COLUMNS),
        amount=parse_amount(resolve_column(record, AMOUNT_COLUMNS)),
        close_date=resolve_column(record, CLOSE_DATE_COLUMNS),
        account_name=resolve_column(record, ACCOUNT_COLUMNS),
        owner_name=resolve_column(record, OWNER_COLUMNS),
        probability=parse_amount(resolve_column(record, PROBABILITY_COLUMNS)),
        created_date=resolve_column(record, CREATED_DATE_COLUMNS),
        last_modified_date=resolve_column(record, MODIFIED_DATE_COLUMNS),
        url=record_url(org_url, opp_id),
    )
