"""
Langgraph 도메인 모듈
LLM을 이용한 CHANGELOG 자동 생성 워크플로우
"""
from .narrative_client import NarrativeClient
from .changelog_workflow import ChangelogWorkflow

__all__ = [
    "NarrativeClient",
    "ChangelogWorkflow",
]
