"""Bucket classifier with explanation trail."""

from typing import Optional, Sequence

from pydantic import BaseModel, Field

from dealboard.config import DEFAULT_ACCESS_KEYWORDS
from dealboard.models.opportunity import Opportunity, Record
from dealboard.normalize import to_opportunity

from .rules import apply_access_method_rule, apply_stage_rule, has_access_column


class ClassificationResult(BaseModel):
    """Outcome of checking one record against one stage bucket."""

    passed: bool
    explanations: list[str] = Field(default_factory=list)
    record: Record = Field(default_factory=dict)
    excluded_by_rule: Optional[str] = Field(
        default=None,
        description="First rule that excluded (stage|access_method)",
    )


class StageClassifier:
    """
    Selects the records of one lifecycle stage.
    The access-method rule applies only when some record in the evaluated
    set has an access-method value; that decision is made over the full set,
    not per record.
    """

    def __init__(
        self,
        stage_keyword: str,
        access_keywords: Sequence[str] = DEFAULT_ACCESS_KEYWORDS,
    ):
        self.stage_keyword = stage_keyword
        self.access_keywords = tuple(access_keywords)

    def evaluate(self, record: Record, access_applicable: bool) -> ClassificationResult:
        explanations: list[str] = []
        excluded_by: Optional[str] = None

        stage_ok, stage_expl = apply_stage_rule(record, self.stage_keyword)
        explanations.append(stage_expl)
        if not stage_ok:
            excluded_by = "stage"

        access_ok, access_expl = apply_access_method_rule(
            record, self.access_keywords, access_applicable
        )
        explanations.append(access_expl)
        if not access_ok and excluded_by is None:
            excluded_by = "access_method"

        return ClassificationResult(
            passed=stage_ok and access_ok,
            explanations=explanations,
            record=record,
            excluded_by_rule=excluded_by,
        )

    def evaluate_many(self, records: Sequence[Record]) -> list[ClassificationResult]:
        applicable = has_access_column(records)
        return [self.evaluate(r, applicable) for r in records]

    def select(self, records: Sequence[Record]) -> list[Record]:
        """Records passing every rule, in input order."""
        return [r.record for r in self.evaluate_many(records) if r.passed]


def classify(
    records: Sequence[Record],
    stage_keyword: str,
    access_keywords: Sequence[str] = DEFAULT_ACCESS_KEYWORDS,
    *,
    org_url: str = "",
    id_prefix: str = "006",
) -> list[Opportunity]:
    """Filter records to one stage and map survivors to Opportunity."""
    selected = StageClassifier(stage_keyword, access_keywords).select(records)
    return [
        to_opportunity(record, idx, org_url=org_url, id_prefix=id_prefix)
        for idx, record in enumerate(selected)
    ]


def classify_buckets(
    records: Sequence[Record],
    buckets: dict[str, str],
    access_keywords: Sequence[str] = DEFAULT_ACCESS_KEYWORDS,
    *,
    org_url: str = "",
    id_prefix: str = "006",
) -> dict[str, list[Opportunity]]:
    """Run classify once per bucket name -> stage keyword."""
    return {
        name: classify(
            records,
            keyword,
            access_keywords,
            org_url=org_url,
            id_prefix=id_prefix,
        )
        for name, keyword in buckets.items()
    }
