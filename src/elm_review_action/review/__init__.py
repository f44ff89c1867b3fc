from .args import build_args
from .runner import ElmReviewError, ToolOutputParseError, ToolStderrError, run_elm_review
from .mapper import ReportValidationError, parse_report, report_errors, wrap

__all__ = [
    "build_args",
    "ElmReviewError",
    "ToolOutputParseError",
    "ToolStderrError",
    "run_elm_review",
    "ReportValidationError",
    "parse_report",
    "report_errors",
    "wrap",
]
