"""Outcome of sheet fetch attempts."""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from dealboard.errors import NoMatch

SourceTag = Literal["service-account", "api-key", "csv", "none", "error"]
AttemptOutcome = Literal["skipped", "ok", "empty", "failed"]


class FetchResult(BaseModel):
    """
    Tagged result of one resolution: the row grid (first row = header) and
    the strategy that produced it. ``none`` means every strategy was exhausted.
    """

    model_config = ConfigDict(frozen=True)

    source: SourceTag
    rows: list[list[str]] = Field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        """At least one data row beyond the header."""
        return len(self.rows) >= 2

    @property
    def data_row_count(self) -> int:
        return max(len(self.rows) - 1, 0)


class FetchAttempt(BaseModel):
    """One entry of the resolution log."""

    model_config = ConfigDict(frozen=True)

    strategy: str
    outcome: AttemptOutcome
    detail: str = ""


class Resolution(BaseModel):
    """Winning (or ``none``) result plus every attempt made to get it."""

    model_config = ConfigDict(frozen=True)

    result: FetchResult
    attempts: list[FetchAttempt] = Field(default_factory=list)

    @property
    def source(self) -> SourceTag:
        return self.result.source

    def require_rows(self) -> list[list[str]]:
        """Row grid of the winning strategy; raises NoMatch when none had data."""
        if not self.result.ok:
            raise NoMatch(self.result.error or "No data rows from any source")
        return self.result.rows
