"""
CI 트리거 정의

이벤트 종류별로 필요한 값만 담은 태그드 변형:
- PullRequestTrigger: PR 열림/갱신
- PushTrigger: main/master 직접 푸시
- ManualTrigger: workflow_dispatch (PR 번호 명시)
"""
from dataclasses import dataclass
from typing import Optional, Union

from app.config import GitHubContext, Settings
from app.exceptions import ConfigurationError, TriggerContextError
from app.logging_config import get_logger

logger = get_logger("trigger")

DEFAULT_BRANCH_REFS = ("refs/heads/main", "refs/heads/master")


@dataclass(frozen=True)
class PullRequestTrigger:
    pr_number: Optional[int]


@dataclass(frozen=True)
class PushTrigger:
    before: Optional[str]
    after: Optional[str]


@dataclass(frozen=True)
class ManualTrigger:
    pr_number: Optional[int]


Trigger = Union[PullRequestTrigger, PushTrigger, ManualTrigger]


def resolve_trigger(context: GitHubContext, settings: Settings) -> Optional[Trigger]:
    """
    이벤트 컨텍스트 → 트리거 변환

    Returns:
        Trigger 또는 None (처리 대상이 아닌 이벤트, 정상 종료)
    """
    event_name = context.event_name

    if event_name == "pull_request":
        pr_number = (context.payload.get("pull_request") or {}).get("number")
        if not pr_number:
            raise TriggerContextError("PR number not found in context")
        return PullRequestTrigger(pr_number=int(pr_number))

    if event_name == "push":
        if context.ref not in DEFAULT_BRANCH_REFS:
            logger.info("Skipping push to non-default branch", extra={"ref": context.ref})
            return None
        return PushTrigger(before=context.payload.get("before"), after=context.payload.get("after"))

    if event_name == "workflow_dispatch":
        if not settings.pr_number:
            raise ConfigurationError("PR_NUMBER is required for workflow_dispatch event")
        return ManualTrigger(pr_number=settings.pr_number)

    logger.info(f"Unsupported event: {event_name}", extra={"ref": context.ref})
    return None


def trigger_pr_number(trigger: Trigger) -> int:
    """PR 기반 트리거의 PR 번호 (없으면 TriggerContextError)"""
    pr_number = getattr(trigger, "pr_number", None)
    if not pr_number:
        raise TriggerContextError("PR number not found in context")
    return pr_number
