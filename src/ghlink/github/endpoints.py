"""Endpoint descriptors and the URL builder.

Each descriptor names one API route and carries exactly the arguments its
template needs.  Arguments are interpolated verbatim; callers pass URL-safe
values.
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, ConfigDict

from ghlink.core.constants import GITHUB_API


class _Endpoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    template: ClassVar[str]


class PullRequestFiles(_Endpoint):
    template: ClassVar[str] = "/repos/{repo}/pulls/{pr}/files"

    repo: str
    pr: int


class PullRequestComments(_Endpoint):
    template: ClassVar[str] = "/repos/{repo}/pulls/{pr}/comments"

    repo: str
    pr: int


class FileContent(_Endpoint):
    template: ClassVar[str] = "/repos/{repo}/contents/{filename}?ref={commit_id}"

    repo: str
    commit_id: str
    filename: str


class User(_Endpoint):
    """The authenticated user."""

    template: ClassVar[str] = "/user"


class Repos(_Endpoint):
    template: ClassVar[str] = "/users/{user}/repos"

    user: str


class Hooks(_Endpoint):
    template: ClassVar[str] = "/repos/{repo}/hooks"

    repo: str


class Collaborators(_Endpoint):
    template: ClassVar[str] = "/repos/{repo}/collaborators/{username}"

    repo: str
    username: str


Endpoint = (
    PullRequestFiles
    | PullRequestComments
    | FileContent
    | User
    | Repos
    | Hooks
    | Collaborators
)


def make_url(endpoint: Endpoint) -> str:
    """Build the fully-qualified API URL for an endpoint descriptor."""
    path = endpoint.template.format(**endpoint.model_dump())
    return f"{GITHUB_API}{path}"
