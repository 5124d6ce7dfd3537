"""Keyed REST access to the Sheets values endpoint."""

import logging
from typing import Optional
from urllib.parse import quote

import httpx

from dealboard.config import SheetConfig, looks_like_private_key
from dealboard.errors import ConfigurationMissing, ShapeMismatch, TransportFailure
from dealboard.http_client import client_scope
from dealboard.models.fetch import FetchResult

from .base import BaseSheetStrategy

logger = logging.getLogger(__name__)

# Browser API keys are 39 chars; anything much longer is not a bare key
MAX_API_KEY_LENGTH = 100


def usable_api_key(config: SheetConfig) -> str:
    """
    The key to send, or "" when there is none.
    Deployments that share one variable for both credential kinds put a bare
    key in ``private_key``; it is used when ``api_key`` is unset and it is not
    PEM material.
    """
    key = config.api_key or config.private_key
    if not key or looks_like_private_key(key) or len(key) > MAX_API_KEY_LENGTH:
        return ""
    return key


class ApiKeyStrategy(BaseSheetStrategy):
    """GET /v4/spreadsheets/{id}/values/{range}?key=... for a sheet readable by key."""

    name = "api-key"

    SHEET_URL = "https://sheets.googleapis.com/v4/spreadsheets/{sheet_id}"
    VALUES_URL = SHEET_URL + "/values/{range}"

    def __init__(self, config: SheetConfig, client: Optional[httpx.Client] = None):
        super().__init__(config)
        self._client = client

    def probe(self) -> bool:
        return bool(self.config.has_document and usable_api_key(self.config))

    def skip_reason(self) -> str:
        key = self.config.api_key or self.config.private_key
        if not key:
            return "no API key"
        if not usable_api_key(self.config):
            return "API key looks like private key material"
        return "no sheet id/gid/tab configured"

    def values_url(self, tab: str) -> str:
        return self.VALUES_URL.format(sheet_id=self.config.sheet_id, range=quote(tab, safe=""))

    def _get_json(self, client: httpx.Client, url: str, **params) -> dict:
        try:
            response = client.get(url, params={"key": usable_api_key(self.config), **params})
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TransportFailure(
                f"Sheets API HTTP {e.response.status_code}: {e.response.text[:300]}"
            ) from e
        except httpx.RequestError as e:
            raise TransportFailure(f"Sheets API request failed: {e}") from e

        try:
            payload = response.json()
        except ValueError as e:
            raise ShapeMismatch("Sheets API returned a non-JSON body") from e
        if not isinstance(payload, dict):
            raise ShapeMismatch("Sheets API returned an unexpected payload")
        return payload

    def tab_title(self, client: httpx.Client) -> str:
        """Configured tab name, or the title of the tab whose sheetId is the gid."""
        if self.config.tab_name:
            return self.config.tab_name
        url = self.SHEET_URL.format(sheet_id=self.config.sheet_id)
        payload = self._get_json(client, url, fields="sheets.properties")
        for sheet in payload.get("sheets") or []:
            if not isinstance(sheet, dict):
                continue
            props = sheet.get("properties") or {}
            if str(props.get("sheetId")) == self.config.gid:
                logger.debug("gid %s resolved to tab %r", self.config.gid, props.get("title"))
                return str(props.get("title") or "")
        raise ConfigurationMissing(f"No tab with gid {self.config.gid} in sheet metadata")

    def fetch(self) -> FetchResult:
        with client_scope(self._client) as client:
            payload = self._get_json(client, self.values_url(self.tab_title(client)))
        values = payload.get("values") or []
        rows = [[str(cell).strip() for cell in row] for row in values]
        return self._result(rows)
