"""
LLM 기반 CHANGELOG 항목 생성기

OpenRouter(OpenAI 호환 엔드포인트)를 ChatOpenAI로 호출합니다.
전송 오류는 그대로 전파하고, 빈 응답은 NarrativeContentError로 처리합니다.
"""
from typing import Any, List, Optional

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import HumanMessage, SystemMessage
from langchain_openai import ChatOpenAI

from app.config import DEFAULT_AI_MODEL, OPENROUTER_BASE_URL
from app.exceptions import NarrativeContentError
from app.logging_config import get_logger, log_error
from domain.changelog.section_locator import extract_entry_label
from .prompts import build_changelog_prompt, has_existing_content

logger = get_logger("narrative_client")


class NarrativeClient:
    """커밋 메시지 → 버전 섹션 마크다운"""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = DEFAULT_AI_MODEL,
        base_url: str = OPENROUTER_BASE_URL,
        llm: Optional[BaseChatModel] = None,
    ):
        self.model = model
        self.llm = llm or ChatOpenAI(
            model=model,
            api_key=api_key,
            base_url=base_url,
            temperature=0.3,
        )

    async def generate(
        self,
        version: str,
        commit_messages: List[str],
        existing_section: Optional[str] = None,
    ) -> str:
        """
        Args:
            version: 프로젝트 버전
            commit_messages: 새 커밋 메시지 목록
            existing_section: 기존 버전 섹션 본문 (없으면 신규 템플릿)

        Returns:
            `## <version>` 으로 시작하는 항목 텍스트
        """
        system, user = build_changelog_prompt(version, commit_messages, existing_section)
        template = "refine" if has_existing_content(existing_section) else "new"
        logger.info(
            f"Generating changelog entry for {version}",
            extra={"model": self.model, "template": template, "commit_count": len(commit_messages)},
        )

        messages = [SystemMessage(content=system), HumanMessage(content=user)]
        try:
            response = await self.llm.ainvoke(messages)
        except Exception as e:
            log_error("Error generating changelog with AI", e, model=self.model)
            raise

        entry = extract_text(response)
        if extract_entry_label(entry) is None:
            logger.warning("Generated changelog entry has no version header")
        return entry


def extract_text(response: Any) -> str:
    """LangChain 응답에서 텍스트 추출 (content가 list 형태일 수 있음)"""
    content = getattr(response, "content", None) if response is not None else None
    if not content:
        raise NarrativeContentError("No content received from the narrative generator")

    if isinstance(content, str):
        text = content
    else:
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and part.get("type") == "text":
                parts.append(part.get("text") or "")
        text = "\n".join(parts)

    if not text.strip():
        raise NarrativeContentError("No valid changelog content received from the narrative generator")

    return text
