"""
config.py

Responsibility: Resolve runtime settings from the process environment.

The only hard requirement is an API token in `GITHUB_TOKEN`. It is checked
before any directory, subprocess or network work is started.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from gh_repo_create import __version__

TOKEN_ENV_VAR = "GITHUB_TOKEN"
API_URL_ENV_VAR = "GITHUB_API_URL"

DEFAULT_API_BASE = "https://api.github.com"
DEFAULT_USER_AGENT = f"gh-repo-create/{__version__}"


class ConfigError(RuntimeError):
    pass


class MissingCredentialError(ConfigError):
    def __init__(self, var_name: str = TOKEN_ENV_VAR) -> None:
        super().__init__(f"{var_name} is not set in the environment")
        self.var_name = var_name


@dataclass(frozen=True)
class Settings:
    """Settings needed to talk to the GitHub API."""

    token: str
    api_base: str = DEFAULT_API_BASE
    user_agent: str = DEFAULT_USER_AGENT

    def __repr__(self) -> str:
        return f"Settings(token='***', api_base={self.api_base!r}, user_agent={self.user_agent!r})"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """
        Build settings from `environ` (defaults to `os.environ`).

        Raises MissingCredentialError if the token is missing or blank.
        """
        env = os.environ if environ is None else environ

        token = (env.get(TOKEN_ENV_VAR) or "").strip()
        if not token:
            raise MissingCredentialError(TOKEN_ENV_VAR)

        api_base = (env.get(API_URL_ENV_VAR) or "").strip() or DEFAULT_API_BASE
        return cls(token=token, api_base=api_base.rstrip("/"))
