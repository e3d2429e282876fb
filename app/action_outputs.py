"""
GitHub Actions 출력/실패 처리
"""
import sys
from typing import Optional

from app.logging_config import get_logger

logger = get_logger("action_outputs")


def set_output(name: str, value: str, output_path: Optional[str] = None) -> None:
    """$GITHUB_OUTPUT 파일에 name=value 추가 (경로가 없으면 로그만 남김)"""
    logger.info(f"Output {name}={value}")
    if not output_path:
        return
    with open(output_path, "a", encoding="utf-8") as handle:
        handle.write(f"{name}={value}\n")


def set_failed(message: str) -> None:
    """워크플로우 에러 어노테이션 출력"""
    # 어노테이션 메시지는 한 줄이어야 함
    escaped = message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")
    print(f"::error::{escaped}", file=sys.stdout, flush=True)
