"""
CHANGELOG 병합 모듈

생성된 버전 항목을 기존 문서에 반영합니다.

우선순위:
1. 기존 문서 없음/공백 → 새 문서 생성
2. 같은 버전 섹션 존재 → 해당 섹션만 교체 (나머지는 바이트 단위로 유지)
3. 새 버전 (또는 헤더 없는 항목) → 제목 줄과 뒤따르는 빈 줄 다음에 삽입
"""
from pathlib import Path
from typing import List, Optional, Union

from app.logging_config import get_logger
from .section_locator import SectionSpan, extract_entry_label, locate

logger = get_logger("changelog_merger")

CHANGELOG_TITLE = "# Changelog"


def merge(existing: Optional[str], generated_entry: str) -> str:
    """
    기존 문서와 생성된 항목을 병합하여 새 문서 텍스트 반환

    Args:
        existing: 기존 CHANGELOG 텍스트 (없으면 None)
        generated_entry: LLM이 생성한 버전 항목 (`## <label>` 로 시작 권장)

    Returns:
        갱신된 전체 문서
    """
    entry = generated_entry.strip()

    if existing is None or not existing.strip():
        logger.info("Creating new changelog document")
        return f"{CHANGELOG_TITLE}\n\n{entry}\n\n"

    label = extract_entry_label(entry)
    if label:
        span = locate(existing, label)
        if span is not None:
            logger.info(f"Replacing existing section: {label}")
            return _replace_section(existing, span, entry)
        logger.info(f"Inserting new section: {label}")
    else:
        logger.warning("Generated entry has no version header, inserting as-is")

    return _insert_after_title(existing, entry)


def _replace_section(document: str, span: SectionSpan, entry: str) -> str:
    """헤더부터 본문 끝까지 교체 (섹션 뒤 텍스트는 그대로)"""
    return document[:span.header_start] + entry + "\n\n" + document[span.body_end:]


def _find_title_index(lines: List[str]) -> Optional[int]:
    for index, line in enumerate(lines):
        if line.startswith("# "):
            return index
    return None


def _insert_after_title(document: str, entry: str) -> str:
    """제목 줄 + 연속된 빈 줄 바로 뒤에 항목 삽입"""
    lines = document.split("\n")
    title_index = _find_title_index(lines)

    if title_index is None:
        return f"{CHANGELOG_TITLE}\n\n{entry}\n\n{document}"

    insert_index = title_index + 1
    while insert_index < len(lines) and lines[insert_index].strip() == "":
        insert_index += 1

    block = [entry, ""]
    if insert_index == title_index + 1:
        # 제목 바로 뒤에 빈 줄이 없던 경우
        block.insert(0, "")

    lines[insert_index:insert_index] = block
    return "\n".join(lines)


def build_changelog_content(changelog_path: Union[str, Path], generated_entry: str) -> str:
    """CHANGELOG 파일을 읽어 (없으면 새로 생성) 병합 결과 반환"""
    path = Path(changelog_path)
    existing: Optional[str] = None
    if path.exists():
        existing = path.read_text(encoding="utf-8")
    else:
        logger.info("Changelog file does not exist, will create it", extra={"path": str(path)})

    return merge(existing, generated_entry)
