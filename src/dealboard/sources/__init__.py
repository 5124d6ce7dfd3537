"""Sheet access strategies and the resolver that cascades over them."""

from dealboard.sources.api_key import ApiKeyStrategy
from dealboard.sources.base import BaseSheetStrategy
from dealboard.sources.csv_export import CsvExportStrategy, looks_like_html
from dealboard.sources.resolver import SheetResolver, default_strategies
from dealboard.sources.service_account import ServiceAccountStrategy

__all__ = [
    "ApiKeyStrategy",
    "BaseSheetStrategy",
    "CsvExportStrategy",
    "ServiceAccountStrategy",
    "SheetResolver",
    "default_strategies",
    "looks_like_html",
]
