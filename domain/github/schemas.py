"""
GitHub 관련 Pydantic 스키마 정의
"""
from typing import Any, Dict, Optional

from pydantic import BaseModel


class CommitInfo(BaseModel):
    """CHANGELOG 생성에 사용하는 커밋 정보"""
    sha: str
    message: str
    author: Optional[str] = None
    timestamp: Optional[str] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "CommitInfo":
        """REST API 커밋 객체 (pulls/commits, compare, commits/{ref}) 변환"""
        commit = data.get("commit") or {}
        git_author = commit.get("author") or {}
        account = data.get("author") or {}
        return cls(
            sha=data.get("sha", ""),
            message=commit.get("message", ""),
            author=git_author.get("name") or account.get("login"),
            timestamp=git_author.get("date"),
        )
