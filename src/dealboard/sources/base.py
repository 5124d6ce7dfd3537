"""Abstract base class for sheet access strategies."""

from abc import ABC, abstractmethod

from dealboard.config import SheetConfig
from dealboard.models.fetch import FetchResult, SourceTag


class BaseSheetStrategy(ABC):
    """
    One way of obtaining the opportunity sheet as a row grid.
    Strategies disqualify themselves through probe() when their prerequisites
    are missing; fetch() raises a DealboardError subclass on failure.
    """

    name: SourceTag = "none"

    def __init__(self, config: SheetConfig):
        self.config = config

    @abstractmethod
    def probe(self) -> bool:
        """True when this strategy has what it needs to try a fetch."""
        pass

    @abstractmethod
    def fetch(self) -> FetchResult:
        """Fetch the sheet and return rows tagged with this strategy's name."""
        pass

    def skip_reason(self) -> str:
        """Human-readable reason probe() is false; used in the resolution log."""
        return "prerequisites missing"

    def _result(self, rows: list[list[str]]) -> FetchResult:
        return FetchResult(source=self.name, rows=rows)
