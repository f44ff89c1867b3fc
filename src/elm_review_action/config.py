# src/elm_review_action/config.py
import json
import logging
from pathlib import Path
from pydantic import Field, ValidationError, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from elm_review_action.models.event import EventPayload


logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Action inputs, exposed by the runner as INPUT_<NAME> variables."""

    model_config = SettingsConfigDict(
        env_prefix="INPUT_",
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )

    # Required
    elm_review: str
    name: str

    # elm-review flags
    elm_review_config: str = ""
    elm_compiler: str = ""
    elm_format: str = ""
    elm_json: str = ""
    elm_files: str = ""
    ignore_dirs: str = ""
    working_directory: str = Field(
        default="",
        validation_alias="INPUT_WORKING-DIRECTORY",
    )

    log_level: str = "INFO"

    @field_validator("elm_review", "name")
    @classmethod
    def check_required(cls, value: str, info: ValidationInfo) -> str:
        value = value.strip()
        if not value:
            raise ValueError(f"Input required and not supplied: {info.field_name}")
        return value

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        value = value.strip().upper() or "INFO"
        if not isinstance(logging.getLevelName(value), int):
            raise ValueError(f"Invalid input log_level: unknown logging level {value!r}")
        return value

    @field_validator(
        "elm_review_config",
        "elm_compiler",
        "elm_format",
        "elm_json",
        "elm_files",
        "ignore_dirs",
        "working_directory",
    )
    @classmethod
    def strip_input(cls, value: str) -> str:
        return value.strip()


class GitHubContext(BaseSettings):
    """Default environment of a workflow run."""

    model_config = SettingsConfigDict(env_prefix="GITHUB_", extra="ignore", frozen=True)

    repository: str = ""
    sha: str = ""
    event_name: str = ""
    event_path: str | None = None
    token: str = ""
    api_url: str = "https://api.github.com"

    @property
    def owner(self) -> str:
        return self.repository.partition("/")[0]

    @property
    def repo(self) -> str:
        return self.repository.partition("/")[2]

    def load_event(self) -> EventPayload:
        """Read the webhook payload that triggered the run, empty if unavailable."""
        if not self.event_path:
            return EventPayload()

        path = Path(self.event_path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read event payload {path}: {e}")
            return EventPayload()

        try:
            return EventPayload.model_validate(data)
        except ValidationError as e:
            logger.warning(f"Unrecognized event payload {path}: {e}")
            return EventPayload()
