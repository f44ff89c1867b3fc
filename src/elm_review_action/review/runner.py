# src/elm_review_action/review/runner.py
import json
import logging
import subprocess
from typing import Any

from elm_review_action.config import Settings
from .args import build_args


logger = logging.getLogger(__name__)


class ElmReviewError(Exception):
    """Base class for failures while running elm-review."""


class ToolStderrError(ElmReviewError):
    """elm-review wrote to stderr; the message is the raw stderr text."""


class ToolOutputParseError(ElmReviewError):
    """elm-review stdout was not JSON; the message is the raw stdout text."""


def run_elm_review(settings: Settings) -> Any:
    """Run elm-review and return its decoded JSON report.

    A non-zero exit code is expected when problems are found and is not an
    error by itself.
    """
    command = [settings.elm_review, *build_args(settings)]
    cwd = settings.working_directory or None
    logger.debug(f"Running {' '.join(command)} in {cwd or '.'}")

    result = subprocess.run(
        command,
        cwd=cwd,
        check=False,
        capture_output=True,
        text=True,
        encoding="utf-8",
        errors="replace",
    )
    logger.debug(f"elm-review exited with code {result.returncode}")

    if result.stderr:
        raise ToolStderrError(result.stderr)

    try:
        return json.loads(result.stdout)
    except json.JSONDecodeError:
        raise ToolOutputParseError(result.stdout) from None
