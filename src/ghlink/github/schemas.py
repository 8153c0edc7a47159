"""Pydantic models for GitHub API request bodies."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class PullRequestLineComment(BaseModel):
    """Payload for commenting on one line of a PR diff."""

    commit_id: str
    path: str
    position: int
    body: str


class WebhookConfig(BaseModel):
    url: str
    content_type: Literal["json"] = "json"


class CreateWebhookRequest(BaseModel):
    """Payload for POST /repos/{repo}/hooks."""

    name: Literal["web"] = "web"
    active: bool = True
    events: list[str] = Field(default_factory=list)
    config: WebhookConfig
