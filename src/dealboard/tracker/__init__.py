"""Issue tracker integration."""

from dealboard.tracker.client import TrackerClient
from dealboard.tracker.parsers import normalize_issue

__all__ = ["TrackerClient", "normalize_issue"]
