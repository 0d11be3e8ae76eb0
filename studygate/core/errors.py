"""Gateway error taxonomy.

Architectural role:
    Defines the two failure tiers raised inside the gateway pipeline and the
    single wire shape both are reported with.

Error tiers:
    - `RequestError`: inbound payload could not be parsed or used.
    - `UpstreamError`: the provider call failed, returned an error status, or
      could not be attempted.

Response formatting:
    Both tiers serialize to `{"error": message}` with HTTP status 500. The client
    cannot distinguish them; the distinction exists for logging and tests.
"""

from typing import Any, Dict, Optional


class GatewayError(Exception):
    """Base class for all gateway failures surfaced to the caller."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message}


class RequestError(GatewayError):
    """Inbound request could not be parsed or is unusable."""


class UpstreamError(GatewayError):
    """Provider call failed or returned a non-success status.

    Attributes:
        upstream_status: HTTP status returned by the provider, or `None` when
            the request never produced a response (network failure, missing key).
    """

    def __init__(self, message: str, *, upstream_status: Optional[int] = None) -> None:
        super().__init__(message)
        self.upstream_status = upstream_status
