from typing import Annotated, Literal
from pydantic import BaseModel, Field, TypeAdapter, field_validator


class Location(BaseModel):
    line: int
    column: int


class Region(BaseModel):
    start: Location
    end: Location


class ReviewMessage(BaseModel):
    message: str
    rule: str
    details: list[str] = Field(default_factory=list)
    region: Region


class ReviewError(BaseModel):
    path: str
    errors: list[ReviewMessage] = Field(default_factory=list)


class ReviewErrors(BaseModel):
    type: Literal["review-errors"]
    errors: list[ReviewError] = Field(default_factory=list)


def message_string(message: str | list[str]) -> str:
    # elm-review sometimes returns a list of messages, usually with one entry
    if isinstance(message, str):
        return message
    return "\n".join(message)


class CliError(BaseModel):
    type: Literal["error"]
    title: str = ""
    path: str | None = None
    message: str

    @field_validator("message", mode="before")
    @classmethod
    def normalize_message(cls, value):
        if isinstance(value, list):
            return message_string([str(item) for item in value])
        return value


class UnexpectedError(BaseModel):
    title: str = "Unexpected error"
    path: str | None = None
    error: str


Report = Annotated[ReviewErrors | CliError, Field(discriminator="type")]

report_adapter: TypeAdapter[ReviewErrors | CliError] = TypeAdapter(Report)
