"""Comprehensive tests for ghlink.core.exceptions — domain exception hierarchy."""

from __future__ import annotations

import pytest

from ghlink.core.exceptions import (
    GhlinkError,
    GitHubError,
    GitHubRequestError,
    GitHubResponseError,
    GitHubStatusError,
    GitHubTransportError,
    raise_for_error,
)
from ghlink.core.models import ErrorDetail, InvalidResponse, StatusError, TransportFailure


class TestGhlinkError:
    def test_basic_creation(self):
        err = GhlinkError("something failed")
        assert str(err) == "something failed"
        assert err.detail == "something failed"

    def test_with_detail(self):
        err = GhlinkError("msg", detail="extra detail")
        assert str(err) == "msg"
        assert err.detail == "extra detail"

    def test_empty_message(self):
        err = GhlinkError()
        assert str(err) == ""
        assert err.detail == ""


class TestGitHubExceptions:
    def test_hierarchy(self):
        assert issubclass(GitHubError, GhlinkError)
        assert issubclass(GitHubRequestError, GitHubError)
        assert issubclass(GitHubStatusError, GitHubRequestError)
        assert issubclass(GitHubTransportError, GitHubRequestError)
        assert issubclass(GitHubResponseError, GitHubError)

    def test_request_error_exposes_detail(self):
        detail = ErrorDetail(status=500, headers=[("a", "b")], body=b"boom")
        err = GitHubStatusError(detail, "GET https://api.github.com/user")
        assert err.status == 500
        assert err.headers == [("a", "b")]
        assert err.body == b"boom"
        assert err.error is detail
        assert str(err) == "GET https://api.github.com/user: HTTP 500"
        assert err.detail == "boom"

    def test_request_error_without_body(self):
        err = GitHubStatusError(ErrorDetail(status=302, reason="too many redirects"))
        assert str(err) == "HTTP 302: too many redirects"
        assert err.detail == str(err)

    def test_transport_error_message(self):
        err = GitHubTransportError(ErrorDetail(reason="connection refused"))
        assert err.status is None
        assert "connection refused" in str(err)


class TestRaiseForError:
    def test_status_error(self):
        with pytest.raises(GitHubStatusError) as exc_info:
            raise_for_error(StatusError(detail=ErrorDetail(status=404)))
        assert exc_info.value.status == 404

    def test_transport_failure(self):
        with pytest.raises(GitHubTransportError):
            raise_for_error(TransportFailure(detail=ErrorDetail(reason="tls")))

    def test_invalid_response(self):
        outcome = InvalidResponse(detail=ErrorDetail(body=b"<html>", reason="invalid JSON"))
        with pytest.raises(GitHubResponseError) as exc_info:
            raise_for_error(outcome, "GET https://api.github.com/user")
        assert str(exc_info.value) == "GET https://api.github.com/user: invalid JSON"
        assert exc_info.value.detail == "<html>"

    def test_all_caught_by_base(self):
        for outcome in (
            StatusError(detail=ErrorDetail(status=500)),
            TransportFailure(detail=ErrorDetail(reason="x")),
            InvalidResponse(detail=ErrorDetail(reason="y")),
        ):
            with pytest.raises(GhlinkError):
                raise_for_error(outcome)
