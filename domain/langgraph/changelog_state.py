"""
LangGraph 워크플로우 상태 정의
"""
from typing import List, Optional, TypedDict

from domain.github.schemas import CommitInfo
from domain.github.trigger import Trigger


class ChangelogState(TypedDict, total=False):
    """
    CHANGELOG 워크플로우 상태

    워크플로우 단계:
    1. VersionLoader: 버전 파일 해석
    2. TriggerResolver: 이벤트 → 트리거 (대상 아니면 종료)
    3. CommitLoader: 새 커밋 조회 (없으면 종료)
    4. SectionReader: 기존 버전 섹션 읽기
    5. NarrativeGenerator: LLM으로 버전 항목 생성
    6. ChangelogMerger: 문서 병합
    7. ChangelogPublisher: 브랜치/PR 게시
    """

    version: Optional[str]
    trigger: Optional[Trigger]
    commits: List[CommitInfo]
    existing_section: Optional[str]  # 기존 버전 섹션 본문
    generated_entry: Optional[str]  # LLM 생성 항목
    changelog_content: Optional[str]  # 병합된 전체 문서
    pr_number: Optional[int]
    changelog_updated: bool
    status: str  # "loading", "skipped", "generating", "publishing", "completed"
