"""Classification rules: each returns (passed, explanation)."""

from typing import Sequence

from dealboard.constants import ACCESS_METHOD_COLUMNS, STAGE_COLUMNS
from dealboard.models.opportunity import Record
from dealboard.parsing.columns import resolve_column


def _normalize_for_match(text: str) -> str:
    """Lowercase and strip for matching."""
    return (text or "").lower().strip()


def stage_of(record: Record) -> str:
    return resolve_column(record, STAGE_COLUMNS)


def access_method_of(record: Record) -> str:
    return resolve_column(record, ACCESS_METHOD_COLUMNS)


def has_access_column(records: Sequence[Record]) -> bool:
    """
    True when any record in the set carries an access-method value.
    Sheet layouts without that column skip the access rule entirely.
    """
    return any(access_method_of(r) for r in records)


def apply_stage_rule(record: Record, stage_keyword: str) -> tuple[bool, str]:
    """Stage must contain the keyword (case-insensitive)."""
    keyword = _normalize_for_match(stage_keyword)
    stage = stage_of(record)
    if not keyword:
        return True, "Stage filter not set"
    if keyword in _normalize_for_match(stage):
        return True, f"Stage '{stage}' matches '{stage_keyword}'"
    return False, f"Excluded: stage '{stage}' does not contain '{stage_keyword}'"


def apply_access_method_rule(
    record: Record,
    access_keywords: Sequence[str],
    applicable: bool,
) -> tuple[bool, str]:
    """
    Access method must contain one of access_keywords when the sheet has the
    column at all. An empty value fails once the rule applies.
    """
    if not applicable:
        return True, "Access method not applicable (no access-method values in sheet)"

    method = access_method_of(record)
    method_norm = _normalize_for_match(method)
    for kw in access_keywords:
        if kw and kw.lower() in method_norm:
            return True, f"Access method '{method}' matches '{kw}'"
    if not method_norm:
        return False, "Excluded: access method empty"
    return False, f"Excluded: access method '{method}' not one of {list(access_keywords)}"
