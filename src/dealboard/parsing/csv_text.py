"""Tabular text parsing for spreadsheet CSV exports.

The export can contain multi-line cells and doubled-quote escapes, so lines
are not split up front: the text is scanned once with a quote-state flag.
"""

BOM = "﻿"


def _normalize_text(text: str) -> str:
    """Strip a leading BOM and fold CRLF / bare CR line endings to LF."""
    if text.startswith(BOM):
        text = text[1:]
    return text.replace("\r\n", "\n").replace("\r", "\n")


def parse_rows(text: str) -> list[list[str]]:
    """
    Parse delimited text into rows of trimmed fields.
    Never raises: an unterminated quote keeps absorbing delimiters and
    newlines until the next quote or end of input.
    """
    text = _normalize_text(text or "")
    rows: list[list[str]] = []
    row: list[str] = []
    current: list[str] = []
    inside_quotes = False
    i = 0
    n = len(text)

    while i < n:
        char = text[i]
        if char == '"':
            if inside_quotes and i + 1 < n and text[i + 1] == '"':
                current.append('"')
                i += 1
            else:
                inside_quotes = not inside_quotes
        elif char == "," and not inside_quotes:
            row.append("".join(current).strip())
            current = []
        elif char == "\n" and not inside_quotes:
            row.append("".join(current).strip())
            if row:
                rows.append(row)
            row = []
            current = []
        else:
            current.append(char)
        i += 1

    if current or row:
        row.append("".join(current).strip())
        rows.append(row)
    return rows


def rows_to_records(rows: list[list[str]]) -> list[dict[str, str]]:
    """
    Map rows to header-keyed records (first row = header).
    Missing trailing cells become ""; blank header labels are skipped.
    """
    if len(rows) < 2:
        return []
    headers = [(h or "").strip() for h in rows[0]]
    records: list[dict[str, str]] = []
    for values in rows[1:]:
        record: dict[str, str] = {}
        for idx, header in enumerate(headers):
            if not header:
                continue
            record[header] = values[idx] if idx < len(values) and values[idx] is not None else ""
        records.append(record)
    return records
