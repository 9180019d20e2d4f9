import pytest

from gh_repo_create.config import DEFAULT_API_BASE, MissingCredentialError, Settings


def test_missing_token_names_the_variable() -> None:
    with pytest.raises(MissingCredentialError) as exc:
        Settings.from_env({})
    assert "GITHUB_TOKEN" in str(exc.value)


def test_blank_token_is_missing() -> None:
    with pytest.raises(MissingCredentialError):
        Settings.from_env({"GITHUB_TOKEN": "   "})


def test_defaults() -> None:
    s = Settings.from_env({"GITHUB_TOKEN": "t0k"})
    assert s.token == "t0k"
    assert s.api_base == DEFAULT_API_BASE
    assert s.user_agent.startswith("gh-repo-create/")


def test_api_base_override_strips_trailing_slash() -> None:
    s = Settings.from_env({"GITHUB_TOKEN": "t0k", "GITHUB_API_URL": "https://ghe.example.com/api/v3/"})
    assert s.api_base == "https://ghe.example.com/api/v3"


def test_repr_hides_token() -> None:
    assert "t0k" not in repr(Settings(token="t0k"))
