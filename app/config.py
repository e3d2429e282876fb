"""
애플리케이션 설정

프로세스 시작 시 한 번 생성하여 각 컴포넌트에 명시적으로 전달합니다.
컴포넌트는 os.environ을 직접 읽지 않습니다.
"""
import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from app.exceptions import ConfigurationError

load_dotenv()

DEFAULT_AI_MODEL = "openai/gpt-4o-mini"
DEFAULT_CHANGELOG_PATH = "CHANGELOG.md"
OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"
GITHUB_API_URL = "https://api.github.com"


def _required(env: Mapping[str, str], name: str) -> str:
    value = (env.get(name) or "").strip()
    if not value:
        raise ConfigurationError(f"{name} is required")
    return value


class Settings(BaseModel):
    """실행 설정 (환경변수 → 값 객체)"""
    openrouter_api_key: str
    github_token: str
    version_file: str
    ai_model: str = DEFAULT_AI_MODEL
    changelog_path: str = DEFAULT_CHANGELOG_PATH
    pr_number: Optional[int] = None
    openrouter_base_url: str = OPENROUTER_BASE_URL
    github_api_url: str = GITHUB_API_URL

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ

        openrouter_api_key = _required(env, "OPENROUTER_API_KEY")
        github_token = _required(env, "GITHUB_TOKEN")
        version_file = _required(env, "VERSION_FILE")

        pr_number: Optional[int] = None
        raw_pr_number = (env.get("PR_NUMBER") or "").strip()
        if raw_pr_number:
            try:
                pr_number = int(raw_pr_number)
            except ValueError:
                raise ConfigurationError(f"PR_NUMBER must be an integer, got {raw_pr_number!r}")

        return cls(
            openrouter_api_key=openrouter_api_key,
            github_token=github_token,
            version_file=version_file,
            ai_model=env.get("AI_MODEL") or DEFAULT_AI_MODEL,
            changelog_path=env.get("CHANGELOG_PATH") or DEFAULT_CHANGELOG_PATH,
            pr_number=pr_number,
            openrouter_base_url=env.get("OPENROUTER_BASE_URL") or OPENROUTER_BASE_URL,
            github_api_url=env.get("GITHUB_API_URL") or GITHUB_API_URL,
        )


class GitHubContext(BaseModel):
    """GitHub Actions 러너가 제공하는 이벤트 컨텍스트"""
    event_name: str = ""
    ref: str = ""
    repository: str = ""
    payload: Dict[str, Any] = Field(default_factory=dict)
    output_path: Optional[str] = None

    @property
    def owner(self) -> str:
        return self.repository.split("/", 1)[0]

    @property
    def repo(self) -> str:
        parts = self.repository.split("/", 1)
        return parts[1] if len(parts) > 1 else ""

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GitHubContext":
        env = os.environ if environ is None else environ

        payload: Dict[str, Any] = {}
        event_path = env.get("GITHUB_EVENT_PATH")
        if event_path and Path(event_path).is_file():
            payload = json.loads(Path(event_path).read_text(encoding="utf-8"))

        return cls(
            event_name=env.get("GITHUB_EVENT_NAME", ""),
            ref=env.get("GITHUB_REF", ""),
            repository=env.get("GITHUB_REPOSITORY", ""),
            payload=payload,
            output_path=env.get("GITHUB_OUTPUT") or None,
        )
