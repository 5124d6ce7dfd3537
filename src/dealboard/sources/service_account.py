"""Service-account access through the Sheets API (gspread + google-auth)."""

import logging
from typing import Callable, Optional

import gspread
from google.auth.exceptions import GoogleAuthError
from google.oauth2.service_account import Credentials

from dealboard.config import SheetConfig, looks_like_private_key
from dealboard.errors import ConfigurationMissing, TransportFailure
from dealboard.models.fetch import FetchResult

from .base import BaseSheetStrategy

logger = logging.getLogger(__name__)

SCOPES = ["https://www.googleapis.com/auth/spreadsheets.readonly"]
TOKEN_URI = "https://oauth2.googleapis.com/token"

ClientFactory = Callable[[SheetConfig], gspread.Client]


def authorize(config: SheetConfig) -> gspread.Client:
    """Build an authorized gspread client from the configured key material."""
    info = {
        "type": "service_account",
        "client_email": config.client_email,
        "private_key": config.private_key,
        "token_uri": TOKEN_URI,
    }
    credentials = Credentials.from_service_account_info(info, scopes=SCOPES)
    return gspread.authorize(credentials)


class ServiceAccountStrategy(BaseSheetStrategy):
    """Reads the tab with a service identity (email + PEM private key)."""

    name = "service-account"

    def __init__(self, config: SheetConfig, client_factory: Optional[ClientFactory] = None):
        super().__init__(config)
        self._client_factory = client_factory or authorize

    def probe(self) -> bool:
        c = self.config
        return bool(c.has_document and c.client_email and looks_like_private_key(c.private_key))

    def skip_reason(self) -> str:
        if not self.config.client_email:
            return "no service account email"
        if not looks_like_private_key(self.config.private_key):
            return "private key missing or not PEM"
        return "no sheet id/tab"

    def _worksheet(self, client: gspread.Client) -> gspread.Worksheet:
        spreadsheet = client.open_by_key(self.config.sheet_id)
        if self.config.tab_name:
            return spreadsheet.worksheet(self.config.tab_name)
        if not self.config.gid.isdigit():
            raise ConfigurationMissing(f"Sheet gid is not numeric: {self.config.gid!r}")
        return spreadsheet.get_worksheet_by_id(int(self.config.gid))

    def fetch(self) -> FetchResult:
        try:
            client = self._client_factory(self.config)
            values = self._worksheet(client).get_all_values()
        except (gspread.exceptions.GSpreadException, GoogleAuthError, ValueError) as e:
            raise TransportFailure(f"Sheets API (service account): {e}") from e
        rows = [[str(cell).strip() for cell in row] for row in values or []]
        logger.debug("Service account fetch returned %d rows", len(rows))
        return self._result(rows)
