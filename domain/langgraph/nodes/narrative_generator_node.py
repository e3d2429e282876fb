"""
⑤ 항목 생성 노드

커밋 메시지와 기존 섹션 본문으로 LLM에 버전 항목 생성을 요청합니다.
"""
from app.logging_config import log_changelog_generation
from ..changelog_state import ChangelogState
from ..narrative_client import NarrativeClient


async def narrative_generator_node(state: ChangelogState, client: NarrativeClient) -> ChangelogState:
    version = state["version"]
    existing_section = state.get("existing_section")

    entry = await client.generate(
        version,
        [commit.message for commit in state["commits"]],
        existing_section,
    )

    log_changelog_generation(version, "entry_generated", refined=existing_section is not None)
    state["generated_entry"] = entry
    return state
