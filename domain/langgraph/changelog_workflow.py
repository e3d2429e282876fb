from functools import partial
from typing import Any, Dict, Optional

from langgraph.graph import END, StateGraph

from app.config import GitHubContext, Settings
from app.logging_config import get_logger
from domain.github.client import GitHubClient
from domain.github.commit_fetcher import CommitFetcher
from domain.github.publish_coordinator import PublishCoordinator
from .changelog_state import ChangelogState
from .narrative_client import NarrativeClient
from .nodes import (
    version_loader_node,
    trigger_resolver_node,
    commit_loader_node,
    section_reader_node,
    narrative_generator_node,
    changelog_merger_node,
    changelog_publisher_node,
)

logger = get_logger("changelog_workflow")


def _continue_unless_skipped(state: ChangelogState) -> str:
    return "skip" if state.get("status") == "skipped" else "continue"


#LangGraph 워크플로우 메인 클래스
class ChangelogWorkflow:
    """
    CHANGELOG 자동 생성 워크플로우

    7개 노드를 순차 실행:
        1. version_loader: 버전 파일 해석
        2. trigger_resolver: 이벤트 종류 판별 (대상 아니면 종료)
        3. commit_loader: 새 커밋 조회 (없으면 종료)
        4. section_reader: 기존 버전 섹션 읽기
        5. narrative_generator: LLM 항목 생성
        6. changelog_merger: 문서 병합
        7. changelog_publisher: 브랜치/PR 게시

    각 단계의 예외는 그대로 전파되어 실행 전체가 실패합니다 (재시도 없음).
    """

    def __init__(
        self,
        settings: Settings,
        context: GitHubContext,
        github_client: GitHubClient,
        narrative_client: Optional[NarrativeClient] = None,
    ):
        """
        Args:
            settings: 실행 설정
            context: GitHub Actions 이벤트 컨텍스트
            github_client: 저장소 API 클라이언트 (테스트 시 대체 가능)
            narrative_client: LLM 클라이언트 (없으면 설정으로 생성)
        """
        self.settings = settings
        self.context = context
        self.commit_fetcher = CommitFetcher(github_client)
        self.publisher = PublishCoordinator(github_client)
        self.narrative_client = narrative_client or NarrativeClient(
            api_key=settings.openrouter_api_key,
            model=settings.ai_model,
            base_url=settings.openrouter_base_url,
        )

        self.workflow = self._build_workflow()

    def _build_workflow(self):
        """LangGraph 워크플로우 구성"""
        workflow = StateGraph(ChangelogState)
        changelog_path = self.settings.changelog_path

        # partial을 사용하여 의존성 바인딩
        workflow.add_node("version_loader", partial(version_loader_node, version_file=self.settings.version_file))
        workflow.add_node(
            "trigger_resolver",
            partial(trigger_resolver_node, github_context=self.context, settings=self.settings),
        )
        workflow.add_node("commit_loader", partial(commit_loader_node, fetcher=self.commit_fetcher))
        workflow.add_node("section_reader", partial(section_reader_node, changelog_path=changelog_path))
        workflow.add_node("narrative_generator", partial(narrative_generator_node, client=self.narrative_client))
        workflow.add_node("changelog_merger", partial(changelog_merger_node, changelog_path=changelog_path))
        workflow.add_node(
            "changelog_publisher",
            partial(changelog_publisher_node, publisher=self.publisher, changelog_path=changelog_path),
        )

        # 워크플로우 연결
        workflow.set_entry_point("version_loader")
        workflow.add_edge("version_loader", "trigger_resolver")
        workflow.add_conditional_edges(
            "trigger_resolver",
            _continue_unless_skipped,
            {"continue": "commit_loader", "skip": END},
        )
        workflow.add_conditional_edges(
            "commit_loader",
            _continue_unless_skipped,
            {"continue": "section_reader", "skip": END},
        )
        workflow.add_edge("section_reader", "narrative_generator")
        workflow.add_edge("narrative_generator", "changelog_merger")
        workflow.add_edge("changelog_merger", "changelog_publisher")
        workflow.add_edge("changelog_publisher", END)

        return workflow.compile()

    async def run(self) -> Dict[str, Any]:
        """
        워크플로우 실행

        Returns:
            {
                "changelog_updated": bool,
                "pr_number": int | None,
                "version": str,
                "status": "completed" | "skipped",
            }
        """
        initial_state: ChangelogState = {
            "status": "loading",
            "changelog_updated": False,
        }

        result = await self.workflow.ainvoke(initial_state)

        logger.info(f"Changelog workflow finished: {result.get('status')}")
        return {
            "changelog_updated": result.get("changelog_updated", False),
            "pr_number": result.get("pr_number"),
            "version": result.get("version"),
            "status": result.get("status"),
        }
