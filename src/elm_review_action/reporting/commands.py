# src/elm_review_action/reporting/commands.py
"""GitHub Actions workflow commands.

The runner scans stdout for lines of the form ``::command key=value::message``
and turns ``error`` commands into annotations on the workflow run.
"""
import sys
from enum import IntEnum
from typing import Any, TextIO


class ExitCode(IntEnum):
    SUCCESS = 0
    FAILURE = 1


def escape_data(value: Any) -> str:
    return str(value).replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def escape_property(value: Any) -> str:
    return escape_data(value).replace(":", "%3A").replace(",", "%2C")


def format_command(command: str, properties: dict[str, Any], message: str) -> str:
    # Falsy properties (including line/col 0) are left out, as the runner expects
    props = ",".join(
        f"{key}={escape_property(value)}" for key, value in properties.items() if value
    )
    if props:
        return f"::{command} {props}::{escape_data(message)}"
    return f"::{command}::{escape_data(message)}"


class Workflow:
    """Writes workflow commands and tracks the exit status of the run."""

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream
        self.exit_code = ExitCode.SUCCESS

    def issue_command(self, command: str, properties: dict[str, Any], message: str) -> None:
        stream = self.stream or sys.stdout
        stream.write(format_command(command, properties, message) + "\n")
        stream.flush()

    def error(
        self,
        message: str,
        file: str | None = None,
        line: int | None = None,
        col: int | None = None,
    ) -> None:
        self.issue_command("error", {"file": file, "line": line, "col": col}, message)

    def set_failed(self, message: str) -> None:
        self.exit_code = ExitCode.FAILURE
        self.error(message)
