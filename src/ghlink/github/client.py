"""Synchronous GitHub API client for PR, content, user, hook and collaborator calls."""

from __future__ import annotations

import base64
import binascii
import json
from typing import Any

import httpx

from ghlink.core.config import Settings, get_settings
from ghlink.core.exceptions import GitHubResponseError, raise_for_error
from ghlink.core.logging import get_logger
from ghlink.core.models import (
    BasicAuth,
    Credentials,
    Error,
    ErrorDetail,
    InvalidResponse,
    Ok,
    Outcome,
)
from ghlink.github.endpoints import (
    Collaborators,
    FileContent,
    Hooks,
    PullRequestComments,
    PullRequestFiles,
    Repos,
    User,
    make_url,
)
from ghlink.github.executor import RequestExecutor
from ghlink.github.schemas import CreateWebhookRequest, PullRequestLineComment, WebhookConfig

logger = get_logger(__name__)


def basic_auth_credentials(settings: Settings) -> BasicAuth:
    """Build basic-auth credentials from settings (empty strings when unset)."""
    return BasicAuth(username=settings.github_user, password=settings.github_password)


def _decode(body: bytes) -> Any:
    if not body:
        return None
    return json.loads(body)


class GitHubClient:
    """Client for a fixed set of GitHub REST endpoints.

    Credentials are passed per call.  ``pull_req_files``, ``pull_req_comments``
    and ``pull_req_comment_line`` return an ``Error`` value on failure; every
    other operation raises ``GitHubRequestError`` instead.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._executor = RequestExecutor(self._settings, transport=transport)

    def __enter__(self) -> GitHubClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._executor.close()

    def _request(
        self,
        credentials: Credentials,
        url: str,
        method: str = "GET",
        body: bytes | None = None,
    ) -> Outcome:
        outcome = self._executor.execute(credentials, url, method, body)
        if not isinstance(outcome, Ok):
            return outcome
        try:
            return Ok(value=_decode(outcome.value))
        except ValueError as e:
            logger.warning("github_api_invalid_json", method=method, url=url)
            return InvalidResponse(
                detail=ErrorDetail(body=outcome.value, reason=f"invalid JSON: {e}")
            )

    def _request_or_raise(
        self,
        credentials: Credentials,
        url: str,
        method: str = "GET",
        body: bytes | None = None,
    ) -> Any:
        outcome = self._request(credentials, url, method, body)
        if isinstance(outcome, Error):
            raise_for_error(outcome, context=f"{method} {url}")
        return outcome.value

    # ── Pull requests (errors returned) ──────────────────────────────────────

    def pull_req_files(self, credentials: Credentials, repo: str, pr: int) -> Outcome:
        """List the files changed in a pull request."""
        url = make_url(PullRequestFiles(repo=repo, pr=pr))
        return self._request(credentials, url)

    def pull_req_comment_line(
        self,
        credentials: Credentials,
        repo: str,
        pr: int,
        commit_id: str,
        filename: str,
        line: int,
        text: str,
    ) -> Outcome:
        """Comment on a line of a PR diff.

        ``line`` is the position in the diff, not the line in the file.
        """
        url = make_url(PullRequestComments(repo=repo, pr=pr))
        payload = PullRequestLineComment(
            commit_id=commit_id,
            path=filename,
            position=line,
            body=text,
        )
        logger.debug("commenting_pr_line", repo=repo, pr=pr, path=filename, position=line)
        return self._request(credentials, url, "POST", payload.model_dump_json().encode())

    def pull_req_comments(self, credentials: Credentials, repo: str, pr: int) -> Outcome:
        url = make_url(PullRequestComments(repo=repo, pr=pr))
        return self._request(credentials, url)

    # ── Contents, users, repos (errors raised) ───────────────────────────────

    def file_content(
        self,
        credentials: Credentials,
        repo: str,
        commit_id: str,
        filename: str,
    ) -> bytes:
        """Fetch a file at a given commit and return its decoded bytes.

        Raises:
            GitHubRequestError: If the request fails.
            GitHubResponseError: If the response has no usable ``content``.
        """
        url = make_url(FileContent(repo=repo, commit_id=commit_id, filename=filename))
        data = self._request_or_raise(credentials, url)

        if not isinstance(data, dict) or not isinstance(data.get("content"), str):
            raise GitHubResponseError(f"No content field in response for {repo}/{filename}")

        try:
            # GitHub wraps the base64 payload in newlines, which b64decode skips
            return base64.b64decode(data["content"])
        except binascii.Error as e:
            raise GitHubResponseError(
                f"Invalid base64 content for {repo}/{filename}", detail=str(e)
            ) from e

    def user(self, credentials: Credentials) -> Any:
        """Return the authenticated user."""
        return self._request_or_raise(credentials, make_url(User()))

    def repos(self, credentials: Credentials, user: object) -> Any:
        """List public repositories of ``user``."""
        return self._request_or_raise(credentials, make_url(Repos(user=str(user))))

    def hooks(self, credentials: Credentials, repo: str) -> Any:
        return self._request_or_raise(credentials, make_url(Hooks(repo=repo)))

    def create_webhook(
        self,
        credentials: Credentials,
        repo: str,
        webhook_url: str,
        events: list[str],
    ) -> Any:
        """Register an active JSON webhook on ``repo`` for ``events``."""
        payload = CreateWebhookRequest(events=list(events), config=WebhookConfig(url=webhook_url))
        logger.debug("creating_webhook", repo=repo, events=payload.events)
        return self._request_or_raise(
            credentials,
            make_url(Hooks(repo=repo)),
            "POST",
            payload.model_dump_json().encode(),
        )

    def add_collaborator(self, credentials: Credentials, repo: str, username: str) -> Any:
        logger.debug("adding_collaborator", repo=repo, username=username)
        return self._request_or_raise(
            credentials,
            make_url(Collaborators(repo=repo, username=username)),
            "PUT",
            b"",
        )
