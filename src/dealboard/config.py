"""Immutable configuration for the sheet strategies and the issue tracker.

This is the only module that reads the process environment. Everything else
receives a ``DashboardConfig`` explicitly.
"""

import os
from pathlib import Path
from typing import Mapping, Optional

try:
    import yaml
except ModuleNotFoundError as e:
    raise ModuleNotFoundError(
        "PyYAML is required for config loading. Run: pip install -e ."
    ) from e
from pydantic import BaseModel, ConfigDict, Field

PRIVATE_KEY_MARKER = "PRIVATE KEY-----"

DEFAULT_BUCKETS: dict[str, str] = {
    "due_diligence": "due diligence",
    "standing_apart": "standing apart",
}

DEFAULT_ACCESS_KEYWORDS: tuple[str, ...] = ("api", "data feed", "datafeed")

# Environment variable -> (section, field)
_ENV_MAP: list[tuple[str, str, str]] = [
    ("GOOGLE_SHEET_ID", "sheet", "sheet_id"),
    ("GOOGLE_SHEET_GID", "sheet", "gid"),
    ("GOOGLE_SHEET_TAB", "sheet", "tab_name"),
    ("GOOGLE_SERVICE_ACCOUNT_EMAIL", "sheet", "client_email"),
    ("GOOGLE_SERVICE_ACCOUNT_PRIVATE_KEY", "sheet", "private_key"),
    ("GOOGLE_API_KEY", "sheet", "api_key"),
    ("CRM_BASE_URL", "sheet", "org_url"),
    ("JIRA_BASE_URL", "tracker", "base_url"),
    ("JIRA_EMAIL", "tracker", "email"),
    ("JIRA_API_TOKEN", "tracker", "api_token"),
    ("JIRA_FILTER_ID", "tracker", "filter_id"),
    ("JIRA_DUE_DATE_FIELD", "tracker", "due_date_field"),
]


class SheetConfig(BaseModel):
    """Where the opportunity sheet lives and which credentials may reach it."""

    model_config = ConfigDict(frozen=True)

    sheet_id: str = ""
    gid: str = ""
    tab_name: str = ""

    client_email: str = ""
    private_key: str = ""
    api_key: str = ""

    org_url: str = Field(default="", description="CRM base URL for record deep links")
    id_prefix: str = "006"

    csv_attempts: int = 2
    csv_retry_delay: float = 1.0

    @property
    def has_document(self) -> bool:
        """A sheet id plus a tab reference (name or gid)."""
        return bool(self.sheet_id and (self.gid or self.tab_name))


class TrackerConfig(BaseModel):
    """Issue tracker endpoint and saved filter."""

    model_config = ConfigDict(frozen=True)

    base_url: str = ""
    email: str = ""
    api_token: str = ""
    filter_id: str = ""
    due_date_field: str = ""
    max_results: int = 100

    @property
    def is_configured(self) -> bool:
        return bool(self.base_url and self.email and self.api_token and self.filter_id)


class DashboardConfig(BaseModel):
    """Top-level configuration passed to the service layer."""

    model_config = ConfigDict(frozen=True)

    sheet: SheetConfig = Field(default_factory=SheetConfig)
    tracker: TrackerConfig = Field(default_factory=TrackerConfig)
    buckets: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_BUCKETS),
        description="Bucket name -> lifecycle stage keyword",
    )
    access_keywords: tuple[str, ...] = DEFAULT_ACCESS_KEYWORDS

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "DashboardConfig":
        """Build config from environment variables only."""
        return cls.from_dict({}, environ=environ)

    @classmethod
    def from_yaml(
        cls,
        path: str | Path,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "DashboardConfig":
        """Load YAML with sheet/tracker/buckets sections; env fills fields left unset."""
        data = yaml.safe_load(Path(path).read_text()) or {}
        return cls.from_dict(data, environ=environ)

    @classmethod
    def from_dict(
        cls,
        data: Mapping,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "DashboardConfig":
        env = os.environ if environ is None else environ
        sections: dict[str, dict] = {
            "sheet": dict(data.get("sheet") or {}),
            "tracker": dict(data.get("tracker") or {}),
        }
        for var, section, field in _ENV_MAP:
            value = (env.get(var) or "").strip()
            if value and sections[section].get(field) in (None, ""):
                sections[section][field] = value

        # Env files often carry the key on one line with escaped newlines
        key = sections["sheet"].get("private_key")
        if key:
            sections["sheet"]["private_key"] = str(key).replace("\\n", "\n")
        for field in ("gid", "filter_id"):
            for section in sections.values():
                if field in section and section[field] is not None:
                    section[field] = str(section[field])

        flat: dict = {
            "sheet": SheetConfig.model_validate(sections["sheet"]),
            "tracker": TrackerConfig.model_validate(sections["tracker"]),
        }
        if data.get("buckets"):
            flat["buckets"] = {str(k): str(v) for k, v in data["buckets"].items()}
        if data.get("access_keywords"):
            flat["access_keywords"] = tuple(str(k) for k in data["access_keywords"])
        return cls.model_validate(flat)


def looks_like_private_key(value: str) -> bool:
    """True for PEM private key material (service-account JSON ``private_key``)."""
    return PRIVATE_KEY_MARKER in (value or "")
