"""
github_client.py

Responsibility: Isolate all direct GitHub REST API interaction.

This module must be the only place that:
- Constructs GitHub REST endpoints
- Sends HTTP requests to the GitHub API
- Interprets GitHub API responses / error payloads

Everything else (scaffolding, git commands, CLI behavior) should use this client.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any

import requests

from gh_repo_create.config import DEFAULT_API_BASE, DEFAULT_USER_AGENT

logger = logging.getLogger(__name__)

API_VERSION = "2022-11-28"


class GitHubError(RuntimeError):
    pass


class GitHubTransportError(GitHubError):
    """The request could not be sent or no response was received."""


class GitHubAPIError(GitHubError):
    """GitHub answered with a non-success status."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"GitHub repo creation failed: {status_code} {body}")
        self.status_code = status_code
        self.body = body


class GitHubResponseError(GitHubError):
    """A success response whose body could not be understood."""


@dataclass(frozen=True)
class RepoRequest:
    name: str
    private: bool = False

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise ValueError("Repository name must not be empty.")

    def to_json(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class RepoInfo:
    ssh_url: str

    @classmethod
    def from_json(cls, data: Any) -> RepoInfo:
        if not isinstance(data, dict):
            raise GitHubResponseError("parsing GitHub API response: expected a JSON object")
        ssh_url = data.get("ssh_url")
        if not isinstance(ssh_url, str) or not ssh_url:
            raise GitHubResponseError("parsing GitHub API response: missing `ssh_url`")
        return cls(ssh_url=ssh_url)


def repo_create_path(org: str | None) -> str:
    """
    Repository creation endpoint: the organization's when `org` is given,
    otherwise the authenticated user's.
    """
    if org:
        return f"/orgs/{org}/repos"
    return "/user/repos"


class GitHubClient:
    def __init__(
        self,
        token: str,
        api_base: str = DEFAULT_API_BASE,
        *,
        user_agent: str = DEFAULT_USER_AGENT,
        session: requests.Session | None = None,
        timeout: float | None = None,
    ) -> None:
        self._token = token
        self._api_base = api_base.rstrip("/")
        self._user_agent = user_agent
        self._session = session or requests.Session()
        self._timeout = timeout

    def _headers(self) -> dict[str, str]:
        return {
            "Accept": "application/vnd.github+json",
            "Authorization": f"Bearer {self._token}",
            "X-GitHub-Api-Version": API_VERSION,
            "User-Agent": self._user_agent,
        }

    def endpoint(self, org: str | None = None) -> str:
        return f"{self._api_base}{repo_create_path(org)}"

    def create_repo(self, request: RepoRequest, org: str | None = None) -> RepoInfo:
        """
        Create a repository under the authenticated user, or under `org` if given.

        Exactly one POST is sent; nothing is retried.
        """
        url = self.endpoint(org)
        logger.debug("POST %s (private=%s)", url, request.private)
        try:
            r = self._session.post(url, headers=self._headers(), json=request.to_json(), timeout=self._timeout)
        except requests.RequestException as e:
            raise GitHubTransportError("GitHub API request failed") from e

        logger.debug("GitHub responded %d", r.status_code)
        if not 200 <= r.status_code < 300:
            raise GitHubAPIError(r.status_code, r.text)

        try:
            data = r.json()
        except ValueError as e:
            raise GitHubResponseError("parsing GitHub API response") from e
        return RepoInfo.from_json(data)
