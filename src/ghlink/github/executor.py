"""Authenticated request executor.

Attaches credentials, sends one HTTP request through httpx, follows 302
redirects up to a bounded number of hops, and folds the response into an
``Ok`` or ``Error`` outcome.
"""

from __future__ import annotations

import threading

import httpx

from ghlink.core.config import Settings
from ghlink.core.constants import ACCEPT_HEADER, REDIRECT_STATUS, SUCCESS_STATUSES
from ghlink.core.logging import get_logger
from ghlink.core.models import (
    BasicAuth,
    Credentials,
    ErrorDetail,
    OAuthToken,
    Ok,
    Outcome,
    StatusError,
    TransportFailure,
)

logger = get_logger(__name__)


def authorize(
    credentials: Credentials, headers: dict[str, str]
) -> tuple[dict[str, str], tuple[str, str] | None]:
    """Return the headers and httpx ``auth`` option for the given credentials.

    Basic credentials only travel as the transport auth option; a token is
    the single header that credentials ever add.
    """
    if isinstance(credentials, BasicAuth):
        return dict(headers), (credentials.username, credentials.password.get_secret_value())
    if isinstance(credentials, OAuthToken):
        authorized = dict(headers)
        authorized["Authorization"] = f"token {credentials.token.get_secret_value()}"
        return authorized, None
    raise TypeError(f"Unsupported credentials: {type(credentials).__name__}")


def _error_detail(response: httpx.Response, reason: str = "") -> ErrorDetail:
    return ErrorDetail(
        status=response.status_code,
        headers=list(response.headers.multi_items()),
        body=response.content,
        reason=reason,
    )


class RequestExecutor:
    """Sends authenticated requests to GitHub.

    Holds no per-call state; the pooled httpx client is safe to share
    between threads.
    """

    def __init__(
        self,
        settings: Settings,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._settings = settings
        self._transport = transport
        self._client: httpx.Client | None = None
        self._lock = threading.Lock()

    def __enter__(self) -> RequestExecutor:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _get_client(self) -> httpx.Client:
        with self._lock:
            if self._client is None or self._client.is_closed:
                self._client = httpx.Client(
                    transport=self._transport,
                    verify=self._settings.verify_ssl,
                    follow_redirects=False,
                )
            return self._client

    def close(self) -> None:
        """Close the underlying HTTP client."""
        with self._lock:
            if self._client and not self._client.is_closed:
                self._client.close()
            self._client = None

    def base_headers(self, with_body: bool = False) -> dict[str, str]:
        headers = {
            "User-Agent": self._settings.user_agent,
            "Accept": ACCEPT_HEADER,
        }
        if with_body:
            headers["Content-Type"] = "application/json"
        return headers

    def execute(
        self,
        credentials: Credentials,
        url: str,
        method: str = "GET",
        body: bytes | str | None = None,
    ) -> Outcome:
        """Send a request and normalize the result.

        200/201 yield ``Ok`` with the raw body.  A 302 is followed to its
        ``Location`` with the same credentials, method and body, at most
        ``settings.max_redirects`` times.  Any other status yields
        ``StatusError``; a request that fails before a usable response arrives
        (connection, timeout, TLS, undecodable body) yields ``TransportFailure``.
        """
        headers, auth = authorize(credentials, self.base_headers(with_body=body is not None))
        client = self._get_client()
        method = method.upper()
        hops = 0

        while True:
            logger.info("github_api_request", method=method, url=url)
            try:
                response = client.request(method, url, headers=headers, content=body, auth=auth)
            except httpx.RequestError as e:
                logger.warning(
                    "github_api_transport_error",
                    method=method,
                    url=url,
                    error=type(e).__name__,
                )
                return TransportFailure(detail=ErrorDetail(reason=str(e) or type(e).__name__))

            status = response.status_code
            if status in SUCCESS_STATUSES:
                return Ok(value=response.content)

            if status != REDIRECT_STATUS:
                logger.warning("github_api_error", method=method, url=url, status=status)
                return StatusError(detail=_error_detail(response))

            location = response.headers.get("Location")
            if not location:
                return StatusError(detail=_error_detail(response, "redirect without Location"))
            if hops >= self._settings.max_redirects:
                logger.warning("github_api_redirect_limit", url=url, hops=hops)
                return StatusError(detail=_error_detail(response, "too many redirects"))

            hops += 1
            url = str(response.url.join(location))
