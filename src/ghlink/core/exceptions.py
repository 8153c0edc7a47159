"""Domain exception hierarchy.

All exceptions inherit from ``GhlinkError`` so callers can catch broadly
or narrowly as needed.  Operations with a fail-loud policy raise the
``GitHubRequestError`` subclasses instead of returning an ``Error`` value.
"""

from __future__ import annotations

from typing import NoReturn

from ghlink.core.models import Error, ErrorDetail, InvalidResponse, TransportFailure


class GhlinkError(Exception):
    """Base exception for all ghlink errors."""

    def __init__(self, message: str = "", *, detail: str = "") -> None:
        self.detail = detail or message
        super().__init__(message)


# ── GitHub ───────────────────────────────────────────────────────────────────


class GitHubError(GhlinkError):
    """Error communicating with the GitHub API."""


class GitHubRequestError(GitHubError):
    """A request failed; carries status, headers and body for diagnostics."""

    def __init__(self, error: ErrorDetail, context: str = "") -> None:
        self.error = error
        message = f"{context}: {error.summary()}" if context else error.summary()
        body = error.body.decode("utf-8", errors="replace")
        super().__init__(message, detail=body or message)

    @property
    def status(self) -> int | None:
        return self.error.status

    @property
    def headers(self) -> list[tuple[str, str]]:
        return self.error.headers

    @property
    def body(self) -> bytes:
        return self.error.body


class GitHubStatusError(GitHubRequestError):
    """GitHub answered with an unexpected HTTP status."""


class GitHubTransportError(GitHubRequestError):
    """The request never got an HTTP response."""


class GitHubResponseError(GitHubError):
    """A successful response did not contain the expected data."""


def raise_for_error(outcome: Error, context: str = "") -> NoReturn:
    """Convert an ``Error`` outcome into the matching exception."""
    if isinstance(outcome, InvalidResponse):
        message = f"{context}: {outcome.detail.summary()}" if context else outcome.detail.summary()
        raise GitHubResponseError(
            message, detail=outcome.detail.body.decode("utf-8", errors="replace")
        )
    if isinstance(outcome, TransportFailure):
        raise GitHubTransportError(outcome.detail, context)
    raise GitHubStatusError(outcome.detail, context)
