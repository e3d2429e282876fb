"""
CHANGELOG 게시 모듈

- 업데이트 모드 (PR 존재): PR의 head 브랜치에 파일 커밋
- 생성 모드 (main 직접 푸시): 새 브랜치 생성 → 파일 커밋 → PR 생성
"""
import time
from pathlib import PurePosixPath
from typing import Callable, Optional

from app.exceptions import TriggerContextError
from app.logging_config import get_logger
from .client import GitHubClient
from .trigger import ManualTrigger, PullRequestTrigger, PushTrigger, Trigger, trigger_pr_number

logger = get_logger("publish_coordinator")

DEFAULT_BASE_BRANCH = "main"
BRANCH_PREFIX = "changelog"


class PublishCoordinator:
    """CHANGELOG 파일을 브랜치/PR로 게시"""

    def __init__(self, client: GitHubClient, clock: Callable[[], float] = time.time):
        self.client = client
        self.clock = clock

    async def publish(self, changelog_path: str, content: str, trigger: Trigger) -> int:
        """
        Args:
            changelog_path: 저장소 내 CHANGELOG 경로
            content: 갱신된 전체 문서
            trigger: 실행 트리거 (PR 기반이면 업데이트, 푸시면 생성)

        Returns:
            PR 번호
        """
        if isinstance(trigger, (PullRequestTrigger, ManualTrigger)):
            return await self._update_pull_request(changelog_path, content, trigger_pr_number(trigger))
        if isinstance(trigger, PushTrigger):
            return await self._create_pull_request(changelog_path, content)
        raise TriggerContextError(f"Unsupported trigger: {trigger!r}")

    async def _read_file_sha(self, path: str, ref: str) -> Optional[str]:
        """브랜치의 파일 sha (파일 없음/디렉터리면 None)"""
        data = await self.client.get_content(path, ref=ref)
        if isinstance(data, dict) and data.get("sha"):
            return data["sha"]
        logger.info(f"{path} does not exist in {ref}, will create it")
        return None

    async def _update_pull_request(self, path: str, content: str, pr_number: int) -> int:
        pr = await self.client.get_pull(pr_number)
        branch = pr["head"]["ref"]
        base_branch = pr["base"]["ref"]

        sha = await self._read_file_sha(path, branch)
        await self.client.create_or_update_content(
            path=path,
            content=content,
            message=_commit_message(path),
            branch=branch,
            sha=sha,
        )

        logger.info(f"Updated {path} in PR #{pr_number}", extra={"branch": branch, "base": base_branch})
        return pr_number

    async def _create_pull_request(self, path: str, content: str) -> int:
        repo_data = await self.client.get_repo()
        base_branch = repo_data.get("default_branch") or DEFAULT_BASE_BRANCH

        branch = f"{BRANCH_PREFIX}-{int(self.clock() * 1000)}"
        ref_data = await self.client.get_ref(f"heads/{base_branch}")
        await self.client.create_ref(f"refs/heads/{branch}", ref_data["object"]["sha"])

        sha = await self._read_file_sha(path, base_branch)
        await self.client.create_or_update_content(
            path=path,
            content=content,
            message=_commit_message(path),
            branch=branch,
            sha=sha,
        )

        file_name = PurePosixPath(path).name
        new_pr = await self.client.create_pull(
            title=f"Update {file_name}",
            head=branch,
            base=base_branch,
            body=(
                f"This PR updates the {file_name} file with recent changes.\n\n"
                "Generated automatically by changelog-generator action."
            ),
        )

        logger.info(f"Created PR #{new_pr['number']} with {file_name} updates", extra={"branch": branch})
        return new_pr["number"]


def _commit_message(path: str) -> str:
    return f"chore: update {PurePosixPath(path).name}"
