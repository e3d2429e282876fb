"""
③ 커밋 로더 노드

트리거에 해당하는 새 커밋을 조회합니다. 커밋이 없으면 status를 "skipped"로 둡니다.
"""
from app.logging_config import get_logger
from domain.github.commit_fetcher import CommitFetcher
from ..changelog_state import ChangelogState

logger = get_logger("commit_loader_node")


async def commit_loader_node(state: ChangelogState, fetcher: CommitFetcher) -> ChangelogState:
    commits = await fetcher.fetch(state["trigger"])

    state["commits"] = commits
    if not commits:
        logger.info("No new commits found")
        state["status"] = "skipped"
    else:
        logger.info(f"Found {len(commits)} new commits")
        state["status"] = "generating"
    return state
