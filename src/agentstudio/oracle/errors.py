"""Errors raised while asking an oracle for a decision.

They split by where the request failed: before it was sent (config), on
the wire (transport), at the endpoint (status), or in reading the answer
(response). None is retried; all propagate out of ``AgentExecutor.run``.
"""

from __future__ import annotations

from agentstudio.exceptions import AgentStudioError


class OracleError(AgentStudioError):
    """The oracle could not produce a decision."""


class OracleConfigError(OracleError):
    """The oracle cannot be built from its settings (e.g., no API key)."""


class OracleTransportError(OracleError):
    """No HTTP response arrived (connection refused, timeout, protocol error)."""


class OracleStatusError(OracleError):
    """The endpoint answered with a non-success HTTP status.

    Attributes:
        status_code: HTTP status of the response.
        body: Response text, as returned by the endpoint.
    """

    reason = "Oracle request rejected"

    def __init__(self, status_code: int, body: str = "") -> None:
        self.status_code = status_code
        self.body = body
        message = f"{self.reason}: HTTP {status_code}"
        if body:
            message = f"{message} - {body}"
        super().__init__(message)


class OracleAuthError(OracleStatusError):
    """The API key was refused (401/403)."""

    reason = "Authentication failed"


class OracleRateLimitError(OracleStatusError):
    """The endpoint is throttling requests (429)."""

    reason = "Rate limited"


class OracleResponseError(OracleError):
    """A successful response whose body cannot be read as a decision."""


def status_error(status_code: int, body: str = "") -> OracleStatusError:
    """Return the error matching a failed HTTP status."""
    if status_code in (401, 403):
        return OracleAuthError(status_code, body)
    if status_code == 429:
        return OracleRateLimitError(status_code, body)
    return OracleStatusError(status_code, body)
