"""
① 버전 로더 노드

버전 파일에서 프로젝트 버전을 읽습니다. 해석 실패는 치명적 오류입니다.
"""
from app.logging_config import log_changelog_generation
from domain.changelog.version_source import read_version_from_file
from ..changelog_state import ChangelogState


def version_loader_node(state: ChangelogState, version_file: str) -> ChangelogState:
    """
    입력:
        - version_file: 버전 파일 경로 (partial로 바인딩)

    출력:
        - version: 프로젝트 버전
        - status: "loading"
    """
    version = read_version_from_file(version_file)
    log_changelog_generation(version, "version_loaded", version_file=version_file)

    state["version"] = version
    state["status"] = "loading"
    return state
