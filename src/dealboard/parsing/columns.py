"""Column lookup tolerant to renamed and re-cased sheet headers."""

from typing import Iterable, Optional, Sequence


def _norm(label: str) -> str:
    return (label or "").strip().lower()


def find_header(
    headers: Iterable[str],
    candidates: Sequence[str],
    strict: bool = False,
) -> Optional[str]:
    """
    Return the header label matching the first candidate, or None.

    Precedence is fixed: exact (case-insensitive, trimmed) for every candidate,
    then starts-with, then contains. Candidates must be listed most specific
    first; strict stops after the exact pass.
    """
    headers = [h for h in headers if _norm(h)]
    wanted = [_norm(c) for c in candidates if _norm(c)]

    for cand in wanted:
        for header in headers:
            if _norm(header) == cand:
                return header
    if strict:
        return None

    for cand in wanted:
        for header in headers:
            if _norm(header).startswith(cand):
                return header
    for cand in wanted:
        for header in headers:
            if cand in _norm(header):
                return header
    return None


def resolve_column(
    record: dict[str, str],
    candidates: Sequence[str],
    strict: bool = False,
) -> str:
    """
    Value of the first column matching candidates; "" when nothing matches.

    An exact match with an empty cell falls through to the next candidate, so
    a blank "Stage" column does not hide a populated "Stage Name".
    Non-strict matching is order sensitive: "Owner" can land on
    "Account Owner" when "Opportunity Owner" is not listed first.
    """
    wanted = [_norm(c) for c in candidates if _norm(c)]
    keys = [k for k in record if _norm(k)]

    for cand in wanted:
        for key in keys:
            if _norm(key) == cand and record[key]:
                return record[key]
    if strict:
        return ""

    for cand in wanted:
        for key in keys:
            if _norm(key).startswith(cand) and record[key]:
                return record[key]
    for cand in wanted:
        for key in keys:
            if cand in _norm(key) and record[key]:
                return record[key]
    return ""
