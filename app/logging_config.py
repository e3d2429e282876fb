"""
로깅 설정

모든 로거는 `changelog` 네임스페이스 아래에 생성됩니다.
`extra`로 전달된 컨텍스트는 메시지 뒤에 key=value 형태로 출력됩니다.
"""
import logging
import os
import sys
from typing import Any, Optional

LOGGER_NAMESPACE = "changelog"
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# LogRecord 기본 속성 (extra 컨텍스트와 구분용)
_RESERVED_ATTRS = set(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime"}


class ContextFormatter(logging.Formatter):
    """extra 필드를 메시지 끝에 붙여주는 포매터"""

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        context = {
            key: value for key, value in vars(record).items()
            if key not in _RESERVED_ATTRS and not key.startswith("_")
        }
        if not context:
            return base
        pairs = " ".join(f"{key}={value}" for key, value in sorted(context.items()))
        return f"{base} | {pairs}"


def setup_logging(level: str = "INFO", fmt: str = DEFAULT_FORMAT) -> logging.Logger:
    """네임스페이스 로거에 stdout 핸들러 설정 (중복 등록 방지)"""
    root = logging.getLogger(LOGGER_NAMESPACE)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not any(getattr(h, "_changelog_handler", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(ContextFormatter(fmt))
        handler._changelog_handler = True  # type: ignore[attr-defined]
        root.addHandler(handler)

    return root


def setup_logging_from_env() -> logging.Logger:
    """LOG_LEVEL 환경변수 기반 로깅 초기화"""
    return setup_logging(os.getenv("LOG_LEVEL", "INFO"))


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")


_logger = get_logger("events")


def log_github_api_call(url: str, status_code: int, **context: Any) -> None:
    """GitHub API 호출 결과 기록"""
    level = logging.DEBUG if status_code < 400 else logging.WARNING
    _logger.log(level, f"GitHub API {status_code}: {url}", extra={"status_code": status_code, **context})


def log_changelog_generation(version: Optional[str], stage: str, **context: Any) -> None:
    """CHANGELOG 생성 단계 기록"""
    _logger.info(f"Changelog generation {stage}: {version}", extra={"version": version, "stage": stage, **context})


def log_error(message: str, error: BaseException, **context: Any) -> None:
    """예외 정보와 함께 에러 기록"""
    _logger.error(
        f"{message}: {error}",
        exc_info=(type(error), error, error.__traceback__),
        extra={"error_type": type(error).__name__, **context},
    )
