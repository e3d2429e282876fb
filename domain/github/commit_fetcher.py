"""
새 커밋 조회

트리거 종류에 따라 CHANGELOG에 반영할 커밋 목록을 가져옵니다.
순서는 GitHub API가 반환한 그대로 유지합니다.
"""
from typing import List

from app.exceptions import TriggerContextError
from app.logging_config import get_logger, log_error
from .client import GitHubClient
from .schemas import CommitInfo
from .trigger import ManualTrigger, PullRequestTrigger, PushTrigger, Trigger, trigger_pr_number

logger = get_logger("commit_fetcher")

# 브랜치 최초 푸시 시 before 값
ZERO_SHA = "0" * 40


class CommitFetcher:
    """트리거별 커밋 조회기"""

    def __init__(self, client: GitHubClient):
        self.client = client

    async def fetch(self, trigger: Trigger) -> List[CommitInfo]:
        try:
            if isinstance(trigger, (PullRequestTrigger, ManualTrigger)):
                pr_number = trigger_pr_number(trigger)
                data = await self.client.list_pull_commits(pr_number)
                logger.info(f"Fetched {len(data)} commits from PR #{pr_number}")
            elif isinstance(trigger, PushTrigger):
                data = await self._fetch_push_commits(trigger)
            else:
                raise TriggerContextError(f"Unsupported trigger: {trigger!r}")
        except Exception as e:
            log_error("Error fetching commits", e)
            raise

        return [CommitInfo.from_api(item) for item in data]

    async def _fetch_push_commits(self, trigger: PushTrigger) -> List[dict]:
        if not trigger.after:
            raise TriggerContextError("After SHA not found in push payload")

        if not trigger.before or trigger.before == ZERO_SHA:
            # 브랜치 최초 푸시: 마지막 커밋만
            logger.info("First push to branch, fetching head commit only", extra={"sha": trigger.after})
            return [await self.client.get_commit(trigger.after)]

        comparison = await self.client.compare_commits(trigger.before, trigger.after)
        commits = comparison.get("commits", [])
        logger.info(f"Fetched {len(commits)} commits from push {trigger.before[:8]}...{trigger.after[:8]}")
        return commits
