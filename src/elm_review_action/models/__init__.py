from .annotation import Annotation, AnnotationLevel
from .event import EventPayload, GitHubPullRequest, GitHubRef, GitHubRepository
from .report import (
    CliError,
    Location,
    Region,
    Report,
    ReviewError,
    ReviewErrors,
    ReviewMessage,
    UnexpectedError,
    message_string,
    report_adapter,
)

__all__ = [
    "Annotation",
    "AnnotationLevel",
    "EventPayload",
    "GitHubPullRequest",
    "GitHubRef",
    "GitHubRepository",
    "CliError",
    "Location",
    "Region",
    "Report",
    "ReviewError",
    "ReviewErrors",
    "ReviewMessage",
    "UnexpectedError",
    "message_string",
    "report_adapter",
]
