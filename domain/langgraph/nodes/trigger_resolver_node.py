"""
② 트리거 판별 노드

이벤트 종류를 트리거로 변환합니다. 처리 대상이 아니면 status를 "skipped"로 둡니다.
"""
from app.config import GitHubContext, Settings
from app.logging_config import get_logger
from domain.github.trigger import resolve_trigger
from ..changelog_state import ChangelogState

logger = get_logger("trigger_resolver_node")


def trigger_resolver_node(
    state: ChangelogState,
    github_context: GitHubContext,
    settings: Settings,
) -> ChangelogState:
    logger.info(f"Event: {github_context.event_name}", extra={"ref": github_context.ref})

    trigger = resolve_trigger(github_context, settings)
    state["trigger"] = trigger
    if trigger is None:
        logger.info("Skipping: not a PR, direct push to main/master, or workflow_dispatch")
        state["status"] = "skipped"
    return state
