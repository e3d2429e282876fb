"""
GitHub REST API 클라이언트

CHANGELOG 생성에 필요한 호출만 노출합니다.
(커밋 조회, 파일 조회/저장, 브랜치 참조, PR 조회/생성)
"""
import base64
from typing import Any, Dict, List, Optional, Union

import httpx

from app.config import GITHUB_API_URL
from app.exceptions import GitHubAPIError
from app.logging_config import get_logger, log_github_api_call

logger = get_logger("github_client")

# pulls/{n}/commits 엔드포인트가 반환하는 최대 커밋 수
MAX_PULL_REQUEST_COMMITS = 250
PER_PAGE = 100


class GitHubClient:
    """저장소 단위 GitHub API 클라이언트"""

    def __init__(
        self,
        token: str,
        owner: str,
        repo: str,
        api_url: str = GITHUB_API_URL,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.owner = owner
        self.repo = repo
        self._client = httpx.AsyncClient(
            base_url=api_url,
            headers={
                "Authorization": f"token {token}",
                "Accept": "application/vnd.github.v3+json",
            },
            transport=transport,
        )

    async def __aenter__(self) -> "GitHubClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    @property
    def repo_path(self) -> str:
        return f"/repos/{self.owner}/{self.repo}"

    async def _request(self, method: str, path: str, allow_missing: bool = False, **kwargs) -> Any:
        response = await self._client.request(method, path, **kwargs)
        log_github_api_call(str(response.request.url), response.status_code, method=method)

        if allow_missing and response.status_code == 404:
            return None

        if response.status_code >= 400:
            raise GitHubAPIError(
                f"GitHub API {method} {path} failed ({response.status_code}): {_error_message(response)}",
                status_code=response.status_code,
                url=str(response.request.url),
            )

        if not response.content:
            return None
        return response.json()

    # ========== 커밋 ==========

    async def list_pull_commits(self, pr_number: int, max_commits: int = MAX_PULL_REQUEST_COMMITS) -> List[Dict[str, Any]]:
        """PR에 포함된 커밋 목록 (GitHub 제한: 최대 250개)"""
        commits: List[Dict[str, Any]] = []
        page = 1
        while len(commits) < max_commits:
            batch = await self._request(
                "GET",
                f"{self.repo_path}/pulls/{pr_number}/commits",
                params={"per_page": PER_PAGE, "page": page},
            ) or []
            commits.extend(batch)
            if len(batch) < PER_PAGE:
                break
            page += 1
        return commits[:max_commits]

    async def compare_commits(self, base: str, head: str) -> Dict[str, Any]:
        return await self._request("GET", f"{self.repo_path}/compare/{base}...{head}")

    async def get_commit(self, ref: str) -> Dict[str, Any]:
        return await self._request("GET", f"{self.repo_path}/commits/{ref}")

    # ========== 파일 ==========

    async def get_content(self, path: str, ref: Optional[str] = None) -> Optional[Union[Dict[str, Any], List[Any]]]:
        """파일(또는 디렉터리) 메타데이터 조회, 없으면 None"""
        params = {"ref": ref} if ref else None
        return await self._request("GET", f"{self.repo_path}/contents/{path}", allow_missing=True, params=params)

    async def create_or_update_content(
        self,
        path: str,
        content: str,
        message: str,
        branch: str,
        sha: Optional[str] = None,
    ) -> Dict[str, Any]:
        """파일 생성/수정 (sha가 있으면 기존 파일 갱신)"""
        payload: Dict[str, Any] = {
            "message": message,
            "content": base64.b64encode(content.encode("utf-8")).decode("utf-8"),
            "branch": branch,
        }
        if sha:
            payload["sha"] = sha
        return await self._request("PUT", f"{self.repo_path}/contents/{path}", json=payload)

    # ========== 브랜치 참조 ==========

    async def get_ref(self, ref: str) -> Dict[str, Any]:
        """ref 예: heads/main"""
        return await self._request("GET", f"{self.repo_path}/git/ref/{ref}")

    async def create_ref(self, ref: str, sha: str) -> Dict[str, Any]:
        """ref 예: refs/heads/changelog-123"""
        return await self._request("POST", f"{self.repo_path}/git/refs", json={"ref": ref, "sha": sha})

    # ========== 저장소 / PR ==========

    async def get_repo(self) -> Dict[str, Any]:
        return await self._request("GET", self.repo_path)

    async def get_pull(self, pr_number: int) -> Dict[str, Any]:
        return await self._request("GET", f"{self.repo_path}/pulls/{pr_number}")

    async def create_pull(self, title: str, head: str, base: str, body: str) -> Dict[str, Any]:
        return await self._request(
            "POST",
            f"{self.repo_path}/pulls",
            json={"title": title, "head": head, "base": base, "body": body},
        )


def _error_message(response: httpx.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return response.text
