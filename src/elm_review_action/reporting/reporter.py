# src/elm_review_action/reporting/reporter.py
import json
import logging
from pydantic import ValidationError

from elm_review_action.models.annotation import Annotation
from elm_review_action.models.report import CliError, UnexpectedError
from elm_review_action.platforms.base import CheckPlatform
from .commands import ExitCode, Workflow


logger = logging.getLogger(__name__)

CHUNK_SIZE = 50

SUCCESS_TITLE = "No problems to report"
SUCCESS_SUMMARY = "I found no problems while reviewing!"


def problems(count: int) -> str:
    return f"{count} {'problem' if count == 1 else 'problems'}"


def failure_title(count: int) -> str:
    return f"{problems(count)} found"


def failure_summary(count: int) -> str:
    return f"I found {problems(count)} while reviewing your project."


def chunked(annotations: list[Annotation], size: int = CHUNK_SIZE) -> list[list[Annotation]]:
    return [annotations[i:i + size] for i in range(0, len(annotations), size)]


def decode_error_record(text: str) -> CliError | UnexpectedError | None:
    """Try to read an exception message as a JSON error record."""
    try:
        data = json.loads(text)
    except ValueError:
        return None

    if not isinstance(data, dict):
        return None

    try:
        if "message" in data:
            return CliError.model_validate({**data, "type": "error"})
        if "error" in data:
            return UnexpectedError.model_validate(data)
    except ValidationError as e:
        logger.debug(f"Error record did not validate: {e}")
    return None


class Reporter:
    """Reports review results to the workflow log or as a check run."""

    def __init__(
        self,
        checks: CheckPlatform,
        workflow: Workflow,
        check_name: str,
        head_sha: str,
    ):
        self.checks = checks
        self.workflow = workflow
        self.check_name = check_name
        self.head_sha = head_sha

    def issue_error(
        self,
        message: str,
        file: str | None = None,
        line: int | None = None,
        col: int | None = None,
    ) -> None:
        """Emit one error command per message line and fail the run."""
        for text in message.strip().split("\n"):
            self.workflow.error(text, file=file, line=line, col=col)
        self.workflow.exit_code = ExitCode.FAILURE

    def report_cli_error(self, error: CliError | UnexpectedError | BaseException) -> None:
        if isinstance(error, CliError):
            message, path = error.message, error.path
        elif isinstance(error, UnexpectedError):
            message, path = error.error, error.path
        else:
            message, path = str(error), None

        self.issue_error(message, file=path)

    def report_exception(self, exc: BaseException) -> None:
        """Report an exception, preferring a JSON error record in its message."""
        record = decode_error_record(str(exc))
        if record is None:
            logger.debug("Reporting unexpected error", exc_info=exc)
            self.report_cli_error(exc)
        else:
            self.report_cli_error(record)

    def issue_errors(self, annotations: list[Annotation]) -> None:
        for annotation in annotations:
            self.issue_error(
                annotation.title or annotation.message,
                file=annotation.path,
                line=annotation.start_line,
                col=annotation.start_column or 0,
            )

    async def create_check_success(self) -> int:
        return await self.checks.create_check(
            name=self.check_name,
            head_sha=self.head_sha,
            conclusion="success",
            output={"title": SUCCESS_TITLE, "summary": SUCCESS_SUMMARY},
        )

    async def create_check_annotations(self, annotations: list[Annotation]) -> int:
        """Create a failed check run, sending annotations 50 at a time."""
        count = len(annotations)
        title = failure_title(count)
        summary = failure_summary(count)
        first, *rest = chunked(annotations)

        check_run_id = await self.checks.create_check(
            name=self.check_name,
            head_sha=self.head_sha,
            conclusion="failure",
            output={
                "title": title,
                "summary": summary,
                "annotations": [a.to_api() for a in first],
            },
        )
        logger.info(f"Created check run {check_run_id} with {len(first)} annotations")

        for chunk in rest:
            await self.checks.update_check(
                check_run_id=check_run_id,
                conclusion="failure",
                output={
                    "title": title,
                    "summary": summary,
                    "annotations": [a.to_api() for a in chunk],
                },
            )
            logger.info(f"Added {len(chunk)} annotations to check run {check_run_id}")

        return check_run_id

    async def report(self, annotations: list[Annotation], is_fork: bool) -> None:
        count = len(annotations)

        if is_fork:
            # Fork tokens are read-only: no check runs
            if count > 0:
                self.issue_errors(annotations)
                self.workflow.set_failed(failure_summary(count))
            return

        if count > 0:
            await self.create_check_annotations(annotations)
        else:
            await self.create_check_success()
