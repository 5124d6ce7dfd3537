"""Unit tests for column resolution."""

from dealboard.parsing.columns import find_header, resolve_column


class TestResolveColumn:
    """Tests for resolve_column."""

    def test_exact_match_case_and_whitespace_insensitive(self) -> None:
        """Exact match ignores case and surrounding whitespace."""
        record = {"  stage name ": "Due Diligence"}
        assert resolve_column(record, ["Stage Name"]) == "Due Diligence"

    def test_candidate_priority_order(self) -> None:
        """Earlier candidates win over later ones."""
        record = {"Owner": "Account owner", "Opportunity Owner": "Deal owner"}
        assert resolve_column(record, ["Opportunity Owner", "Owner"]) == "Deal owner"

    def test_not_found_returns_empty(self) -> None:
        """No matching column returns empty string."""
        assert resolve_column({"Stage": "x"}, ["Amount"]) == ""

    def test_empty_exact_value_falls_through(self) -> None:
        """A blank exact match does not hide a populated later candidate."""
        record = {"Stage": "", "StageName": "Standing Apart"}
        assert resolve_column(record, ["Stage", "StageName"]) == "Standing Apart"

    def test_strict_rejects_substring_match(self) -> None:
        """Strict lookup of Opportunity ID ignores Source Opportunity ID."""
        record = {"Source Opportunity ID": "006A0000003DHP0"}
        assert resolve_column(record, ["Opportunity ID", "Id"], strict=True) == ""

    def test_non_strict_allows_substring_match(self) -> None:
        """The same record resolves when not strict."""
        record = {"Source Opportunity ID": "006A0000003DHP0"}
        assert resolve_column(record, ["Opportunity ID", "Id"]) == "006A0000003DHP0"

    def test_exact_beats_substring_for_later_candidate(self) -> None:
        """Exact pass runs over every candidate before any partial pass."""
        record = {"Access Method (L) Notes": "see wiki", "Access Method": "API"}
        assert resolve_column(record, ["Access Method (L)", "Access Method"]) == "API"

    def test_starts_with_beats_contains(self) -> None:
        """Prefix matches are preferred over mid-string matches."""
        record = {"Account Owner": "Wrong", "Owner (Opportunity)": "Right"}
        assert resolve_column(record, ["Owner"]) == "Right"

    def test_contains_is_order_sensitive(self) -> None:
        """Documented risk: contains picks the first key in record order."""
        record = {"Account Owner": "Account side", "Opportunity Owner Email": "deal@x"}
        assert resolve_column(record, ["Owner"]) == "Account side"


class TestFindHeader:
    """Tests for find_header."""

    def test_returns_label(self) -> None:
        headers = ["Opportunity ID", "Access_Method_L__c", "StageName"]
        assert find_header(headers, ["Stage", "StageName"]) == "StageName"
        assert find_header(headers, ["Access Method (L)", "Access_Method_L__c"]) == "Access_Method_L__c"

    def test_none_when_missing(self) -> None:
        assert find_header(["a", "b"], ["Stage"]) is None

    def test_strict(self) -> None:
        headers = ["Source Opportunity ID"]
        assert find_header(headers, ["Opportunity ID"], strict=True) is None
        assert find_header(headers, ["Opportunity ID"]) == "Source Opportunity ID"
