"""
⑥ 문서 병합 노드
"""
from domain.changelog.changelog_merger import build_changelog_content
from ..changelog_state import ChangelogState


def changelog_merger_node(state: ChangelogState, changelog_path: str) -> ChangelogState:
    state["changelog_content"] = build_changelog_content(changelog_path, state["generated_entry"])
    state["status"] = "publishing"
    return state
