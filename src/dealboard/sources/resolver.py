"""Ordered cascade over sheet strategies."""

import logging
from typing import Optional, Sequence

import httpx

from dealboard.config import SheetConfig
from dealboard.models.fetch import FetchAttempt, FetchResult, Resolution

from .api_key import ApiKeyStrategy
from .base import BaseSheetStrategy
from .csv_export import CsvExportStrategy
from .service_account import ServiceAccountStrategy

logger = logging.getLogger(__name__)


def default_strategies(
    config: SheetConfig,
    client: Optional[httpx.Client] = None,
) -> list[BaseSheetStrategy]:
    """Service account first, then API key, then public CSV export."""
    return [
        ServiceAccountStrategy(config),
        ApiKeyStrategy(config, client=client),
        CsvExportStrategy(config, client=client),
    ]


class SheetResolver:
    """
    Tries strategies strictly in order and stops at the first one that
    returns at least one data row. A strategy's exception only ends that
    strategy; exhausting the list yields a ``none`` result.
    """

    def __init__(self, strategies: Sequence[BaseSheetStrategy]):
        self.strategies = list(strategies)

    @classmethod
    def for_config(cls, config: SheetConfig, client: Optional[httpx.Client] = None) -> "SheetResolver":
        return cls(default_strategies(config, client=client))

    def eligible(self) -> list[str]:
        """Names of strategies whose prerequisites are present."""
        return [s.name for s in self.strategies if s.probe()]

    def resolve(self) -> Resolution:
        attempts: list[FetchAttempt] = []
        last_error: Optional[str] = None

        for strategy in self.strategies:
            if not strategy.probe():
                reason = strategy.skip_reason()
                logger.debug("Skipping %s: %s", strategy.name, reason)
                attempts.append(FetchAttempt(strategy=strategy.name, outcome="skipped", detail=reason))
                continue

            try:
                result = strategy.fetch()
            except Exception as e:
                last_error = f"{strategy.name}: {e}"
                logger.warning("Sheet strategy %s failed: %s", strategy.name, e)
                attempts.append(FetchAttempt(strategy=strategy.name, outcome="failed", detail=str(e)))
                continue

            if result.ok:
                logger.info("Sheet resolved via %s (%d data rows)", strategy.name, result.data_row_count)
                attempts.append(
                    FetchAttempt(
                        strategy=strategy.name,
                        outcome="ok",
                        detail=f"{result.data_row_count} rows",
                    )
                )
                return Resolution(result=result, attempts=attempts)

            logger.warning("Sheet strategy %s returned no data rows", strategy.name)
            attempts.append(FetchAttempt(strategy=strategy.name, outcome="empty", detail="no data rows"))

        if not any(a.outcome != "skipped" for a in attempts):
            last_error = "No sheet access method is configured"
        return Resolution(
            result=FetchResult(source="none", error=last_error or "No data rows from any source"),
            attempts=attempts,
        )
