"""
Test configuration and fixtures
"""
import pytest
from unittest.mock import AsyncMock

from app.config import GitHubContext, Settings
from domain.github.client import GitHubClient


def make_commit(sha: str, message: str, author: str = "Test Author") -> dict:
    """GitHub REST API commit object."""
    return {
        "sha": sha,
        "commit": {
            "message": message,
            "author": {"name": author, "email": "test@example.com", "date": "2025-10-11T12:34:56Z"},
        },
        "author": {"login": "testuser"},
    }


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at files inside a temporary checkout."""
    version_file = tmp_path / "package.json"
    version_file.write_text('{"name": "test-package", "version": "2.0.0"}', encoding="utf-8")
    return Settings(
        openrouter_api_key="test-openrouter-key",
        github_token="test-github-token",
        version_file=str(version_file),
        changelog_path=str(tmp_path / "CHANGELOG.md"),
    )


@pytest.fixture
def pr_context():
    return GitHubContext(
        event_name="pull_request",
        ref="refs/pull/42/merge",
        repository="testuser/test-repo",
        payload={"pull_request": {"number": 42}},
    )


@pytest.fixture
def push_context():
    return GitHubContext(
        event_name="push",
        ref="refs/heads/main",
        repository="testuser/test-repo",
        payload={"before": "a" * 40, "after": "b" * 40},
    )


@pytest.fixture
def sample_commits():
    return [
        make_commit("abc123def456", "feat: add OAuth2 login"),
        make_commit("def456abc789", "fix: form validation blocked submissions"),
    ]


@pytest.fixture
def mock_github_client():
    """GitHubClient test double exposing only the narrow API surface."""
    client = AsyncMock(spec=GitHubClient)
    client.owner = "testuser"
    client.repo = "test-repo"
    return client
