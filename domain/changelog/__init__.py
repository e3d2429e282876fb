"""
CHANGELOG 문서 처리 모듈

버전 파일 해석, 버전 섹션 탐색, 생성된 항목 병합을 담당합니다.
"""
from .section_locator import (
    SectionSpan,
    locate,
    read_section_body,
    read_version_section,
    extract_entry_label,
)
from .changelog_merger import CHANGELOG_TITLE, merge, build_changelog_content
from .version_source import read_version_from_file

__all__ = [
    'SectionSpan',
    'locate',
    'read_section_body',
    'read_version_section',
    'extract_entry_label',
    'CHANGELOG_TITLE',
    'merge',
    'build_changelog_content',
    'read_version_from_file',
]
