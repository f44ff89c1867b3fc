# src/elm_review_action/review/mapper.py
import textwrap
from typing import Any
from pydantic import ValidationError

from elm_review_action.models.annotation import Annotation, AnnotationLevel
from elm_review_action.models.report import CliError, ReviewErrors, report_adapter
from .runner import ElmReviewError


CHECK_MESSAGE_WRAP = 80


class ReportValidationError(ElmReviewError):
    """Decoded elm-review output matches neither report shape."""


def parse_report(data: Any) -> ReviewErrors | CliError:
    """Validate decoded elm-review output against the known report shapes."""
    try:
        return report_adapter.validate_python(data)
    except ValidationError as e:
        raise ReportValidationError(f"Unrecognized elm-review report: {e}") from e


def wrap(width: int, text: str) -> str:
    """Word-wrap each line of text, keeping blank lines and long words intact."""
    wrapped = []
    for line in text.split("\n"):
        if not line.strip():
            wrapped.append("")
            continue
        wrapped.extend(
            textwrap.wrap(
                line,
                width=width,
                break_long_words=False,
                break_on_hyphens=False,
            )
        )
    return "\n".join(wrapped)


def report_errors(report: ReviewErrors) -> list[Annotation]:
    """Flatten a review report into check run annotations, in report order."""
    annotations = []

    for error in report.errors:
        for message in error.errors:
            region = message.region
            annotation = Annotation(
                path=error.path,
                annotation_level=AnnotationLevel.FAILURE,
                start_line=region.start.line,
                end_line=region.end.line,
                title=f"{message.rule}: {message.message}",
                message=wrap(CHECK_MESSAGE_WRAP, "\n\n".join(message.details)),
            )

            # Columns are only allowed on single-line annotations
            if region.start.line == region.end.line:
                annotation.start_column = region.start.column
                annotation.end_column = region.end.column

            annotations.append(annotation)

    return annotations
