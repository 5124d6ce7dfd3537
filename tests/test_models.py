"""Unit tests for dealboard models."""

import pytest
from pydantic import ValidationError

from dealboard.errors import NoMatch
from dealboard.models import FetchResult, Opportunity, OpportunityReport, Resolution, Ticket


class TestOpportunity:
    """Tests for Opportunity model."""

    def test_camel_case_dump(self) -> None:
        opp = Opportunity(id="006A0000003DHP0IAO", stage_name="Due Diligence", owner_name="Dana")
        data = opp.model_dump(by_alias=True)
        assert data["stageName"] == "Due Diligence"
        assert data["ownerName"] == "Dana"
        assert "stage_name" not in data

    def test_accepts_aliases(self) -> None:
        opp = Opportunity.model_validate({"id": "row-0", "accessMethod": "API"})
        assert opp.access_method == "API"
        assert not opp.has_canonical_id

    def test_frozen(self) -> None:
        opp = Opportunity(id="row-0")
        with pytest.raises(ValidationError):
            opp.name = "changed"


class TestTicket:
    def test_defaults(self) -> None:
        ticket = Ticket(id="1", key="OPS-1")
        assert ticket.status == "Unknown"
        assert ticket.priority == "None"
        assert ticket.type == "Task"
        assert ticket.due_date is None
        assert "dueDate" in ticket.model_dump(by_alias=True)


class TestFetchResult:
    def test_ok_requires_data_row(self) -> None:
        assert not FetchResult(source="csv", rows=[["Stage"]]).ok
        result = FetchResult(source="csv", rows=[["Stage"], ["Due Diligence"]])
        assert result.ok
        assert result.data_row_count == 1


class TestOpportunityReport:
    def test_empty(self) -> None:
        report = OpportunityReport.empty(["a", "b"], source="none", error="boom")
        assert report.buckets == {"a": [], "b": []}
        assert report.totals == {"a": 0, "b": 0}
        assert report.error == "boom"
        assert report.diagnostics is None


class TestResolution:
    def test_require_rows_raises_no_match(self) -> None:
        resolution = Resolution(result=FetchResult(source="none", error="csv: HTTP 404"))
        with pytest.raises(NoMatch, match="HTTP 404"):
            resolution.require_rows()

    def test_require_rows_returns_grid(self) -> None:
        rows = [["Stage"], ["Due Diligence"]]
        assert Resolution(result=FetchResult(source="csv", rows=rows)).require_rows() == rows
