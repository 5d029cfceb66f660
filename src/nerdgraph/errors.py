"""Exceptions raised before or during the NerdGraph round trip.

Errors reported *by* NerdGraph (protocol errors, mutation errors) are not
exceptions; they come back as a tagged PublishResult.
"""

from typing import Optional


class DashboardPublishError(Exception):
    """Base class for failures that abort a publish run."""


class ConfigurationError(DashboardPublishError):
    """Required environment configuration is missing or invalid."""


class TransportError(DashboardPublishError):
    """The HTTP exchange with NerdGraph failed.

    Covers connection failures, timeouts, non-2xx responses and bodies that
    are not a JSON object.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_body: Optional[str] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body


class SummaryWriteError(DashboardPublishError):
    """The dashboard was created but its summary file could not be written."""

    def __init__(self, message: str, guid: str, url: str, path: str):
        super().__init__(message)
        self.guid = guid
        self.url = url
        self.path = path
