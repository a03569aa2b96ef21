"""
Custom exceptions for the Polar Metrics locality pipeline.

Upstream failures are absorbed by the service; only address validation and
report compilation failures reach the caller.
"""
from typing import Optional


class PolarMetricsError(Exception):
    """Base exception for Polar Metrics errors."""
    pass


class UpstreamUnavailableError(PolarMetricsError):
    """An upstream source failed, timed out, or returned an unusable body."""

    def __init__(self, source: str, message: str, status_code: Optional[int] = None) -> None:
        self.source = source
        self.message = message
        self.status_code = status_code
        super().__init__(f"{source}: {message}")


class APIKeyMissingError(UpstreamUnavailableError):
    """Required API key is not configured."""

    def __init__(self, source: str) -> None:
        super().__init__(source, "API key not configured")


class InvalidAddressError(PolarMetricsError, ValueError):
    """Address is empty or blank."""
    pass


class ReportCompilationError(PolarMetricsError):
    """Stage or merge failed on data the pipeline could not interpret."""
    pass
