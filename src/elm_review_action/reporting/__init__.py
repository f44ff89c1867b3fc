from .commands import ExitCode, Workflow, format_command
from .reporter import Reporter, decode_error_record

__all__ = ["ExitCode", "Workflow", "format_command", "Reporter", "decode_error_record"]
