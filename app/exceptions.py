"""
CHANGELOG 생성기 예외 정의

모든 치명적 오류는 ChangelogError를 상속하며, main에서 한 번에 처리됩니다.
"""
from typing import Optional


class ChangelogError(Exception):
    """CHANGELOG 생성 파이프라인의 기본 예외"""


class ConfigurationError(ChangelogError):
    """필수 설정 누락 (API 키, 토큰, 버전 파일, 수동 실행 PR 번호)"""


class VersionParseError(ChangelogError):
    """버전 파일을 읽거나 해석할 수 없음"""


class TriggerContextError(ChangelogError):
    """이벤트 페이로드에 필요한 값이 없음 (PR 번호, after SHA)"""


class NarrativeContentError(ChangelogError):
    """LLM 응답이 비어 있거나 텍스트를 추출할 수 없음"""


class GitHubAPIError(ChangelogError):
    """GitHub REST API 호출 실패"""

    def __init__(self, message: str, status_code: Optional[int] = None, url: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.url = url
