# src/elm_review_action/review/args.py
from elm_review_action.config import Settings


def _arg(flag: str, value: str) -> list[str]:
    if value == "":
        return []
    return [flag, value]


def _lines(value: str) -> list[str]:
    if value == "":
        return []
    return value.split("\n")


def build_args(settings: Settings) -> list[str]:
    """Build the elm-review command line (without the executable)."""
    return [
        *_lines(settings.elm_files),
        "--report=json",
        *_arg("--config", settings.elm_review_config),
        *_arg("--compiler", settings.elm_compiler),
        *_arg("--elm-format-path", settings.elm_format),
        *_arg("--elmjson", settings.elm_json),
        *_arg("--ignore-dirs", " ".join(_lines(settings.ignore_dirs))),
    ]
