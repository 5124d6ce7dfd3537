"""Sheet layout diagnostics for when classification finds nothing."""

from pydantic import BaseModel, Field

from dealboard.constants import ACCESS_METHOD_COLUMNS, STAGE_COLUMNS
from dealboard.parsing.columns import find_header
from dealboard.parsing.csv_text import rows_to_records
from dealboard.parsing.identifiers import is_valid_id

SAMPLE_SIZE = 3


class IdCell(BaseModel):
    """A cell holding something that validates as a record id."""

    column: str
    index: int
    header: str
    value: str


class SheetDiagnostics(BaseModel):
    """What the fetched sheet actually looks like."""

    total_rows: int = 0
    total_columns: int = 0
    headers: list[str] = Field(default_factory=list, description="'<letter>: <label>' per column")
    stage_column: str = "NOT FOUND"
    access_method_column: str = "NOT FOUND"
    unique_stages: list[str] = Field(default_factory=list)
    unique_access_methods: list[str] = Field(default_factory=list)
    id_cells: list[IdCell] = Field(default_factory=list)
    sample_rows: list[dict[str, str]] = Field(default_factory=list)


def column_letter(index: int) -> str:
    """0 -> A, 25 -> Z, 26 -> AA."""
    letters = ""
    n = index + 1
    while n > 0:
        n, rem = divmod(n - 1, 26)
        letters = chr(65 + rem) + letters
    return letters


def inspect_rows(rows: list[list[str]], id_prefix: str = "006") -> SheetDiagnostics:
    """Summarize headers, detected columns, distinct stage/access values and id cells."""
    if not rows:
        return SheetDiagnostics()

    headers = rows[0]
    records = rows_to_records(rows)
    stage_col = find_header(headers, STAGE_COLUMNS)
    access_col = find_header(headers, ACCESS_METHOD_COLUMNS)

    stages: list[str] = []
    methods: list[str] = []
    for record in records:
        if stage_col and record.get(stage_col) and record[stage_col] not in stages:
            stages.append(record[stage_col])
        if access_col and record.get(access_col) and record[access_col] not in methods:
            methods.append(record[access_col])

    id_cells: list[IdCell] = []
    for row in rows[1:]:
        for idx, cell in enumerate(row):
            if is_valid_id(cell, id_prefix):
                id_cells.append(
                    IdCell(
                        column=column_letter(idx),
                        index=idx,
                        header=headers[idx] if idx < len(headers) else "",
                        value=cell.strip(),
                    )
                )

    return SheetDiagnostics(
        total_rows=len(rows),
        total_columns=len(headers),
        headers=[f"{column_letter(i)}: {h}" for i, h in enumerate(headers)],
        stage_column=stage_col or "NOT FOUND",
        access_method_column=access_col or "NOT FOUND",
        unique_stages=stages,
        unique_access_methods=methods,
        id_cells=id_cells,
        sample_rows=records[:SAMPLE_SIZE],
    )
