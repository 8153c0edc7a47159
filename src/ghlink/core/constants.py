"""Constants used across the client."""

from __future__ import annotations

# Base origin for every endpoint
GITHUB_API: str = "https://api.github.com"

ACCEPT_HEADER: str = "application/vnd.github.v3+json"

DEFAULT_USER_AGENT: str = "ghlink-webhook"

# Redirect hops followed before giving up
DEFAULT_MAX_REDIRECTS: int = 5

# Statuses treated as success
SUCCESS_STATUSES: frozenset[int] = frozenset({200, 201})

REDIRECT_STATUS: int = 302
