from enum import Enum
from pydantic import BaseModel


class AnnotationLevel(str, Enum):
    FAILURE = "failure"


class Annotation(BaseModel):
    path: str
    start_line: int
    end_line: int
    start_column: int | None = None
    end_column: int | None = None
    annotation_level: AnnotationLevel = AnnotationLevel.FAILURE
    message: str
    title: str | None = None

    def to_api(self) -> dict:
        """Payload accepted by the check runs endpoint."""
        return self.model_dump(mode="json", exclude_none=True)
