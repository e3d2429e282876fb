"""
CHANGELOG 버전 섹션 탐색 모듈

`## <버전>` 헤더로 시작하는 섹션의 위치를 찾습니다.
섹션 본문은 헤더 줄 끝부터 다음 `## ` 헤더 직전(또는 문서 끝)까지입니다.
"""
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Pattern, Union

from app.logging_config import get_logger

logger = get_logger("section_locator")

# 다음 형제 섹션의 시작
SIBLING_HEADER_PATTERN = re.compile(r'^## ', re.MULTILINE)

# 생성된 항목의 첫 번째 버전 헤더
ENTRY_HEADER_PATTERN = re.compile(r'^##[ \t]+(.+?)[ \t\r]*$', re.MULTILINE)


@dataclass(frozen=True)
class SectionSpan:
    """문서 내 버전 섹션 위치 (문자 오프셋)"""
    label: str
    header_start: int
    body_start: int
    body_end: int
    body: str


def _version_header_pattern(label: str) -> Pattern[str]:
    # 버전 문자열은 리터럴로 비교 (1.0.0-beta.1 의 '.' 등)
    return re.compile(rf'^## {re.escape(label)}[^\S\n]*$', re.MULTILINE)


def locate(document: str, label: str) -> Optional[SectionSpan]:
    """
    버전 섹션 위치 탐색

    Args:
        document: CHANGELOG 전체 텍스트
        label: 버전 문자열 (정확히 일치하는 헤더만 인정)

    Returns:
        SectionSpan 또는 None (헤더 없음)
    """
    if not label:
        raise ValueError("Version must be provided to locate a section")

    if not document:
        return None

    match = _version_header_pattern(label).search(document)
    if match is None:
        return None

    body_start = match.end()
    next_header = SIBLING_HEADER_PATTERN.search(document, body_start)
    body_end = next_header.start() if next_header else len(document)

    return SectionSpan(
        label=label,
        header_start=match.start(),
        body_start=body_start,
        body_end=body_end,
        body=document[body_start:body_end].strip(),
    )


def read_section_body(document: str, label: str) -> Optional[str]:
    """섹션 본문만 반환 (앞뒤 공백 제거, 내부 빈 줄은 유지)"""
    span = locate(document, label)
    return span.body if span else None


def read_version_section(changelog_path: Union[str, Path], label: str) -> Optional[str]:
    """CHANGELOG 파일에서 버전 섹션 본문 읽기 (파일이 없거나 읽을 수 없으면 None)"""
    try:
        content = Path(changelog_path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.info(f"Changelog not readable, no existing section: {e}", extra={"path": str(changelog_path)})
        return None

    return read_section_body(content, label)


def extract_entry_label(entry: str) -> Optional[str]:
    """생성된 항목의 첫 `## <label>` 헤더에서 버전 추출"""
    match = ENTRY_HEADER_PATTERN.search(entry)
    if not match:
        return None
    return match.group(1).strip() or None
