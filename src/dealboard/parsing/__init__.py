"""Parsing helpers: tabular text, column lookup, identifiers, amounts."""

from dealboard.parsing.amounts import parse_amount
from dealboard.parsing.columns import find_header, resolve_column
from dealboard.parsing.csv_text import parse_rows, rows_to_records
from dealboard.parsing.identifiers import is_valid_id, to_18

__all__ = [
    "find_header",
    "is_valid_id",
    "parse_amount",
    "parse_rows",
    "resolve_column",
    "rows_to_records",
    "to_18",
]
