# src/elm_review_action/main.py
import asyncio
import logging
import sys
from pydantic import ValidationError

from elm_review_action.config import GitHubContext, Settings
from elm_review_action.models.event import EventPayload
from elm_review_action.models.report import CliError
from elm_review_action.platforms.github import GitHubChecksClient
from elm_review_action.reporting.commands import Workflow
from elm_review_action.reporting.reporter import Reporter
from elm_review_action.review.mapper import parse_report, report_errors
from elm_review_action.review.runner import run_elm_review


logger = logging.getLogger(__name__)


def build_reporter(
    settings: Settings,
    context: GitHubContext,
    event: EventPayload,
    workflow: Workflow,
) -> Reporter:
    checks = GitHubChecksClient(
        token=context.token,
        owner=context.owner,
        repo=context.repo,
        api_url=context.api_url,
    )
    return Reporter(
        checks=checks,
        workflow=workflow,
        check_name=settings.name,
        head_sha=event.head_sha(context.sha),
    )


async def run(settings: Settings, reporter: Reporter, event: EventPayload) -> None:
    """Run elm-review and report its findings. Never raises."""
    try:
        report = parse_report(run_elm_review(settings))

        if isinstance(report, CliError):
            logger.info(f"elm-review failed: {report.title}")
            reporter.report_cli_error(report)
            return

        annotations = report_errors(report)
        logger.info(f"elm-review reported {len(annotations)} problem(s)")

        await reporter.report(annotations, is_fork=event.is_fork())
    except Exception as e:
        reporter.report_exception(e)


def _input_errors(error: ValidationError) -> list[str]:
    messages = []
    for err in error.errors():
        field = ".".join(str(part) for part in err["loc"])
        if err["type"] == "missing":
            messages.append(f"Input required and not supplied: {field}")
        elif err["type"] == "value_error":
            messages.append(str(err["ctx"]["error"]))
        else:
            messages.append(f"Invalid input {field}: {err['msg']}")
    return messages


def main() -> None:
    workflow = Workflow()

    try:
        settings = Settings()
    except ValidationError as e:
        logging.basicConfig(level=logging.INFO)
        for message in _input_errors(e):
            workflow.set_failed(message)
        sys.exit(int(workflow.exit_code))

    logging.basicConfig(level=settings.log_level)

    context = GitHubContext()
    event = context.load_event()
    reporter = build_reporter(settings, context, event, workflow)

    asyncio.run(run(settings, reporter, event))
    sys.exit(int(workflow.exit_code))
