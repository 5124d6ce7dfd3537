"""Unit tests for record -> Opportunity mapping."""

import pytest

from dealboard.normalize import canonical_id, record_url, to_opportunity


class TestCanonicalId:
    """Tests for canonical_id."""

    def test_extends_15_char_id(self) -> None:
        assert canonical_id({"Opportunity ID": "006A0000003DHP0"}) == "006A0000003DHP0IAO"

    def test_id_column_variant(self) -> None:
        assert canonical_id({"Id": " 006A0000003DHP0IAO "}) == "006A0000003DHP0IAO"

    def test_ignores_similar_columns(self) -> None:
        """Strict lookup: Source Opportunity ID is not the record's id."""
        assert canonical_id({"Source Opportunity ID": "006A0000003DHP0"}) == ""

    def test_invalid_id(self) -> None:
        assert canonical_id({"Opportunity ID": "005A0000003DHP0"}) == ""


class TestRecordUrl:
    """Tests for record_url."""

    def test_joins(self) -> None:
        assert record_url("https://x.crm.test/", "006A0000003DHP0IAO") == "https://x.crm.test/006A0000003DHP0IAO"

    def test_empty_without_id_or_base(self) -> None:
        assert record_url("https://x.crm.test", "") == ""
        assert record_url("", "006A0000003DHP0IAO") == ""


class TestToOpportunity:
    """Tests for to_opportunity."""

    def test_maps_sample_row(self, sample_sheet_rows: list[dict[str, str]]) -> None:
        opp = to_opportunity(sample_sheet_rows[0], 0, org_url="https://example.my.crm.test")
        assert opp.id == "006A0000003DHP0IAO"
        assert opp.name == "Acme Data Licence"
        assert opp.stage_name == "3 - Due Diligence"
        assert opp.access_method == "API"
        assert opp.amount == pytest.approx(1234567.89)
        assert opp.close_date == "2026-11-30"
        assert opp.account_name == "Acme Corp"
        assert opp.owner_name == "Dana Smith"
        assert opp.probability == 60.0
        assert opp.url == "https://example.my.crm.test/006A0000003DHP0IAO"

    def test_european_amount(self, sample_sheet_rows: list[dict[str, str]]) -> None:
        assert to_opportunity(sample_sheet_rows[1], 0).amount == pytest.approx(1234.5)

    def test_missing_id_is_synthetic(self) -> None:
        opp = to_opportunity({"Opportunity Name": "No id", "Stage": "Due Diligence"}, 7, org_url="https://x")
        assert opp.id == "row-7"
        assert opp.url == ""
        assert not opp.has_canonical_id

    def test_renamed_columns(self) -> None:
        record = {
            "Id": "006A0000003DHP0",
            "Name": "Renamed",
            "StageName": "Standing Apart",
            "Access_Method_L__c": "Data Feed",
            "Opp Amount": "2.500,00",
            "CloseDate": "2027-02-01",
            "AccountName": "Hooli",
            "OwnerName": "Kim",
            "Win %": "35",
            "CreatedDate": "2026-01-02",
            "LastModifiedDate": "2026-03-04",
        }
        opp = to_opportunity(record, 0)
        assert opp.name == "Renamed"
        assert opp.stage_name == "Standing Apart"
        assert opp.access_method == "Data Feed"
        assert opp.amount == 2500.0
        assert opp.close_date == "2027-02-01"
        assert opp.account_name == "Hooli"
        assert opp.owner_name == "Kim"
        assert opp.probability == 35.0
        assert opp.created_date == "2026-01-02"
        assert opp.last_modified_date == "2026-03-04"
