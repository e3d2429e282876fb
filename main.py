import asyncio
import sys

from app.action_outputs import set_failed, set_output
from app.config import GitHubContext, Settings
from app.exceptions import ConfigurationError
from app.logging_config import get_logger, log_error, setup_logging_from_env
from domain.github.client import GitHubClient
from domain.langgraph.changelog_workflow import ChangelogWorkflow

# 로깅 초기화
setup_logging_from_env()
logger = get_logger("main")


async def run() -> int:
    """CI 단계 진입점 (성공 0, 실패 1)"""
    try:
        context = GitHubContext.from_env()
        settings = Settings.from_env()
        if not context.owner or not context.repo:
            raise ConfigurationError("GITHUB_REPOSITORY is required (owner/repo)")

        logger.info(f"Starting changelog generation for {context.repository}", extra={"event": context.event_name})

        async with GitHubClient(
            token=settings.github_token,
            owner=context.owner,
            repo=context.repo,
            api_url=settings.github_api_url,
        ) as client:
            workflow = ChangelogWorkflow(settings, context, client)
            result = await workflow.run()

    except Exception as e:
        log_error("Changelog generation failed", e)
        set_failed(str(e))
        return 1

    if result["pr_number"] is not None:
        set_output("pr-number", str(result["pr_number"]), context.output_path)
    set_output("changelog-updated", "true" if result["changelog_updated"] else "false", context.output_path)

    if result["changelog_updated"]:
        logger.info(f"Changelog generated successfully for {result['version']}")
    return 0


def main() -> None:
    sys.exit(asyncio.run(run()))


if __name__ == "__main__":
    main()
