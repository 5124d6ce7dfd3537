"""Unit tests for sheet diagnostics."""

from dealboard.diagnostics import column_letter, inspect_rows
from dealboard.parsing.csv_text import parse_rows


class TestColumnLetter:
    def test_letters(self) -> None:
        assert column_letter(0) == "A"
        assert column_letter(25) == "Z"
        assert column_letter(26) == "AA"
        assert column_letter(27) == "AB"


class TestInspectRows:
    """Tests for inspect_rows."""

    def test_empty(self) -> None:
        diag = inspect_rows([])
        assert diag.total_rows == 0
        assert diag.stage_column == "NOT FOUND"

    def test_sample(self, sample_sheet_csv: str) -> None:
        diag = inspect_rows(parse_rows(sample_sheet_csv))
        assert diag.total_rows == 6
        assert diag.total_columns == 9
        assert diag.headers[0] == "A: Opportunity ID"
        assert diag.stage_column == "Stage"
        assert diag.access_method_column == "Access Method (L)"
        assert "Closed Won" in diag.unique_stages
        assert diag.unique_access_methods[0] == "API"
        assert len(diag.sample_rows) == 3
        assert [c.value for c in diag.id_cells][:2] == ["006A0000003DHP0", "006B0000001xyzQ"]
        assert diag.id_cells[0].column == "A"

    def test_id_in_unexpected_column(self) -> None:
        rows = [["Account", "Source Opportunity ID"], ["Acme", "006A0000003DHP0"]]
        diag = inspect_rows(rows)
        assert diag.id_cells[0].header == "Source Opportunity ID"
        assert diag.id_cells[0].column == "B"
