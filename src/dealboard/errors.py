"""Exception types for source resolution.

None of these escape ``dealboard.pipeline``; they are raised inside a strategy
and recorded by the resolver as a failed attempt.
"""


class DealboardError(Exception):
    """Base class for dealboard errors."""


class ConfigurationMissing(DealboardError):
    """No usable credentials or document reference were configured."""


class TransportFailure(DealboardError):
    """Network or HTTP error from one access method."""


class ShapeMismatch(DealboardError):
    """Response body is not tabular data (e.g. an HTML login page)."""


class NoMatch(DealboardError):
    """Every access method was exhausted without usable rows."""
