"""
⑦ 게시 노드

PR 기반 트리거면 기존 PR 브랜치에 커밋, 푸시 트리거면 새 PR을 생성합니다.
"""
from app.logging_config import log_changelog_generation
from domain.github.publish_coordinator import PublishCoordinator
from ..changelog_state import ChangelogState


async def changelog_publisher_node(
    state: ChangelogState,
    publisher: PublishCoordinator,
    changelog_path: str,
) -> ChangelogState:
    pr_number = await publisher.publish(changelog_path, state["changelog_content"], state["trigger"])

    log_changelog_generation(state["version"], "published", pr_number=pr_number)
    state["pr_number"] = pr_number
    state["changelog_updated"] = True
    state["status"] = "completed"
    return state
