"""
Tests for commit fetching
"""
import pytest

from app.exceptions import GitHubAPIError, TriggerContextError
from domain.github.commit_fetcher import ZERO_SHA, CommitFetcher
from domain.github.trigger import ManualTrigger, PullRequestTrigger, PushTrigger
from conftest import make_commit


class TestPullRequestCommits:
    """PR based triggers list the PR's commits."""

    @pytest.mark.asyncio
    async def test_fetch_pull_request_commits(self, mock_github_client, sample_commits):
        mock_github_client.list_pull_commits.return_value = sample_commits

        commits = await CommitFetcher(mock_github_client).fetch(PullRequestTrigger(pr_number=123))

        mock_github_client.list_pull_commits.assert_awaited_once_with(123)
        assert [c.message for c in commits] == ["feat: add OAuth2 login", "fix: form validation blocked submissions"]
        assert commits[0].sha == "abc123def456"
        assert commits[0].author == "Test Author"
        assert commits[0].timestamp == "2025-10-11T12:34:56Z"

    @pytest.mark.asyncio
    async def test_manual_trigger_uses_pull_request_commits(self, mock_github_client, sample_commits):
        mock_github_client.list_pull_commits.return_value = sample_commits

        commits = await CommitFetcher(mock_github_client).fetch(ManualTrigger(pr_number=9))

        mock_github_client.list_pull_commits.assert_awaited_once_with(9)
        assert len(commits) == 2

    @pytest.mark.asyncio
    async def test_missing_pr_number(self, mock_github_client):
        with pytest.raises(TriggerContextError, match="PR number not found"):
            await CommitFetcher(mock_github_client).fetch(PullRequestTrigger(pr_number=None))

        mock_github_client.list_pull_commits.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_api_failure_is_propagated(self, mock_github_client):
        mock_github_client.list_pull_commits.side_effect = GitHubAPIError("API Error", status_code=500)

        with pytest.raises(GitHubAPIError, match="API Error"):
            await CommitFetcher(mock_github_client).fetch(PullRequestTrigger(pr_number=123))


class TestPushCommits:
    """Push triggers use compare or the single head commit."""

    @pytest.mark.asyncio
    async def test_compare_before_and_after(self, mock_github_client, sample_commits):
        mock_github_client.compare_commits.return_value = {"commits": sample_commits}

        commits = await CommitFetcher(mock_github_client).fetch(PushTrigger(before="abc123", after="def456"))

        mock_github_client.compare_commits.assert_awaited_once_with("abc123", "def456")
        mock_github_client.get_commit.assert_not_awaited()
        assert len(commits) == 2

    @pytest.mark.asyncio
    @pytest.mark.parametrize("before", [None, "", ZERO_SHA])
    async def test_first_push_fetches_single_commit(self, mock_github_client, before):
        """Null or all-zero 'before' means a new branch: only the 'after' commit is used."""
        mock_github_client.get_commit.return_value = make_commit("def456", "Initial commit")

        commits = await CommitFetcher(mock_github_client).fetch(PushTrigger(before=before, after="def456"))

        mock_github_client.get_commit.assert_awaited_once_with("def456")
        mock_github_client.compare_commits.assert_not_awaited()
        assert [c.message for c in commits] == ["Initial commit"]

    @pytest.mark.asyncio
    async def test_missing_after(self, mock_github_client):
        with pytest.raises(TriggerContextError, match="After SHA not found"):
            await CommitFetcher(mock_github_client).fetch(PushTrigger(before="abc123", after=None))

    @pytest.mark.asyncio
    async def test_compare_failure_is_propagated(self, mock_github_client):
        mock_github_client.compare_commits.side_effect = GitHubAPIError("Compare failed", status_code=404)

        with pytest.raises(GitHubAPIError, match="Compare failed"):
            await CommitFetcher(mock_github_client).fetch(PushTrigger(before="abc123", after="def456"))

    @pytest.mark.asyncio
    async def test_empty_compare(self, mock_github_client):
        mock_github_client.compare_commits.return_value = {"commits": []}

        commits = await CommitFetcher(mock_github_client).fetch(PushTrigger(before="abc123", after="def456"))

        assert commits == []
