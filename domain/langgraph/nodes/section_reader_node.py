"""
④ 섹션 리더 노드

체크아웃된 CHANGELOG에서 현재 버전 섹션 본문을 읽습니다 (없으면 None).
"""
from domain.changelog.section_locator import read_version_section
from ..changelog_state import ChangelogState


def section_reader_node(state: ChangelogState, changelog_path: str) -> ChangelogState:
    state["existing_section"] = read_version_section(changelog_path, state["version"])
    return state
