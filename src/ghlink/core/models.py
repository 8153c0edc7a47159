"""Domain models shared across ghlink modules.

Credentials and request outcomes are immutable Pydantic models.  Secrets are
held as ``SecretStr`` so they never leak through ``repr`` or dumps.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SecretStr


# ── Credentials ──────────────────────────────────────────────────────────────


class BasicAuth(BaseModel):
    """Username/password pair, sent as an HTTP basic-auth transport option."""

    model_config = ConfigDict(frozen=True)

    username: str = ""
    password: SecretStr = SecretStr("")


class OAuthToken(BaseModel):
    """Token sent in an ``Authorization: token ...`` header."""

    model_config = ConfigDict(frozen=True)

    token: SecretStr


Credentials = BasicAuth | OAuthToken


# ── Request outcomes ────────────────────────────────────────────────────────


class ErrorDetail(BaseModel):
    """Diagnostics for a failed request.

    ``status`` is ``None`` when the request never got an HTTP response.
    ``headers`` keeps every header line in order, repeated names included.
    """

    model_config = ConfigDict(frozen=True)

    status: int | None = None
    headers: list[tuple[str, str]] = Field(default_factory=list)
    body: bytes = b""
    reason: str = ""

    def header(self, name: str) -> str | None:
        """First value of header ``name`` (case-insensitive), if present."""
        name = name.lower()
        for key, value in self.headers:
            if key.lower() == name:
                return value
        return None

    def summary(self) -> str:
        if self.status is None:
            return self.reason or "no response"
        text = f"HTTP {self.status}"
        return f"{text}: {self.reason}" if self.reason else text


class Ok(BaseModel):
    """Successful outcome.

    The executor stores the raw response body; endpoint operations store the
    decoded JSON value.
    """

    model_config = ConfigDict(frozen=True)

    value: Any = None

    @property
    def ok(self) -> bool:
        return True


class Error(BaseModel):
    """Failed outcome carrying the error detail."""

    model_config = ConfigDict(frozen=True)

    detail: ErrorDetail

    @property
    def ok(self) -> bool:
        return False


class StatusError(Error):
    """The server answered with a status outside the accepted set."""


class TransportFailure(Error):
    """Connection, timeout or TLS failure before any response arrived."""


class InvalidResponse(Error):
    """An accepted status whose body could not be decoded as JSON."""


Outcome = Ok | Error
