"""
GitHub 연동 모듈
"""
from .client import GitHubClient
from .schemas import CommitInfo
from .trigger import ManualTrigger, PullRequestTrigger, PushTrigger, Trigger, resolve_trigger
from .commit_fetcher import CommitFetcher
from .publish_coordinator import PublishCoordinator

__all__ = [
    "GitHubClient",
    "CommitInfo",
    "ManualTrigger",
    "PullRequestTrigger",
    "PushTrigger",
    "Trigger",
    "resolve_trigger",
    "CommitFetcher",
    "PublishCoordinator",
]
