"""
CHANGELOG 항목 생성 프롬프트

두 가지 템플릿:
- new entry: 해당 버전 섹션이 없거나 비어 있을 때
- refine existing: 기존 섹션 본문에 새 커밋 내용을 병합할 때
"""
from typing import List, Optional, Tuple

SYSTEM_PROMPT = (
    "You are a technical writer maintaining the CHANGELOG.md of a software project.\n"
    "Write concise, human-readable release notes in Markdown.\n"
    "Output only the changelog entry itself, with no preamble, no explanation and no code fences."
)

# 포함/제외 기준 (두 템플릿 공통)
CONTENT_POLICY = (
    "Include ONLY user-facing functional changes: new features, bug fixes and behavior changes.\n"
    "Exclude process-only changes: tests, documentation, formatting, linting, CI configuration "
    "and dependency bumps."
)


def format_commit_messages(commit_messages: List[str]) -> str:
    return "\n".join(f"- {message}" for message in commit_messages)


def _format_rules(version: str) -> str:
    return (
        f"1. MUST start with a version header in format: ## {version}\n"
        "2. Use bullet points (-) for each change\n"
        "3. Write in natural language (not just a list of commits)\n"
        "4. Group related changes together when possible\n"
        "5. Use clear, simple language\n"
        "6. Start directly with the version header (no \"Here is...\" or similar preambles)\n"
    )


def _example(version: str) -> str:
    return (
        "Example format:\n"
        f"## {version}\n\n"
        "- Added new user authentication feature with OAuth2 support\n"
        "- Fixed critical bug in form validation that prevented submissions\n"
    )


def build_new_entry_prompt(version: str, commit_messages: List[str]) -> str:
    return (
        f"PROJECT VERSION: {version}\n\n"
        f"GIT COMMITS:\n{format_commit_messages(commit_messages)}\n\n"
        f"{CONTENT_POLICY}\n"
        "If none of the commits is a functional change, write a single short bullet that "
        "summarizes the maintenance work instead, so the section is never empty.\n\n"
        "Generate a changelog entry that follows these rules:\n"
        f"{_format_rules(version)}\n"
        f"{_example(version)}"
    )


def build_refinement_prompt(version: str, commit_messages: List[str], existing_section: str) -> str:
    return (
        f"PROJECT VERSION: {version}\n\n"
        f"CURRENT CHANGELOG CONTENT FOR THIS VERSION:\n{existing_section}\n\n"
        f"NEW GIT COMMITS TO ADD:\n{format_commit_messages(commit_messages)}\n\n"
        f"{CONTENT_POLICY}\n\n"
        "Refine the existing entry:\n"
        "- Merge the new information into the current content and avoid duplicates\n"
        "- Keep every existing bullet that no new functional change replaces\n"
        "- Put new information first; the new commits are newer than the current content\n\n"
        "The refined entry must follow these rules:\n"
        f"{_format_rules(version)}\n"
        f"{_example(version)}"
    )


def has_existing_content(existing_section: Optional[str]) -> bool:
    return bool(existing_section and existing_section.strip())


def build_changelog_prompt(
    version: str,
    commit_messages: List[str],
    existing_section: Optional[str] = None,
) -> Tuple[str, str]:
    """(system, user) 프롬프트 생성"""
    if has_existing_content(existing_section):
        return SYSTEM_PROMPT, build_refinement_prompt(version, commit_messages, existing_section or "")
    return SYSTEM_PROMPT, build_new_entry_prompt(version, commit_messages)
