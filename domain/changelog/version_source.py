"""
버전 파일 파서

지원 형식:
- JSON 메타데이터 파일 (package.json 등, 최상위 `version` 문자열 필드)
- 텍스트 파일 (첫 번째 비어 있지 않은 줄)
"""
import json
from pathlib import Path
from typing import Union

from app.exceptions import VersionParseError

_VERSIONING_HINT = "Your project must have proper versioning."


def read_version_from_file(version_file: Union[str, Path]) -> str:
    """버전 파일을 읽어 버전 문자열 반환"""
    path = Path(version_file)
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise VersionParseError(f"Failed to read version from {version_file}: {e}") from e

    if path.suffix.lower() == ".json":
        return parse_version_from_json(content, str(version_file))

    return parse_version_from_text(content, str(version_file))


def parse_version_from_json(content: str, file_path: str) -> str:
    try:
        data = json.loads(content)
    except json.JSONDecodeError:
        raise VersionParseError(f"Invalid JSON in {file_path}. {_VERSIONING_HINT}")

    version = data.get("version") if isinstance(data, dict) else None
    if not version:
        raise VersionParseError(f"No 'version' field found in {file_path}. {_VERSIONING_HINT}")

    if not isinstance(version, str):
        raise VersionParseError(f"'version' field in {file_path} must be a string. {_VERSIONING_HINT}")

    version = version.strip()
    if not version:
        raise VersionParseError(f"Empty 'version' field in {file_path}. {_VERSIONING_HINT}")

    return version


def parse_version_from_text(content: str, file_path: str) -> str:
    for line in content.splitlines():
        version = line.strip()
        if version:
            return version

    raise VersionParseError(f"Empty version file: {file_path}. {_VERSIONING_HINT}")
