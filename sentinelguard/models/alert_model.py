from datetime import datetime, timezone
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, StrictStr, StringConstraints

Severity = Literal["LOW", "MEDIUM", "HIGH"]

NonEmptyStr = Annotated[StrictStr, StringConstraints(min_length=1)]


def now_iso() -> str:
    """Hora UTC actual en ISO-8601 con milisegundos y sufijo 'Z'."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class AlertSubmission(BaseModel):
    """Forma del cuerpo recibido en POST /api/alert."""

    model_config = ConfigDict(extra="ignore")

    type: NonEmptyStr
    message: NonEmptyStr
    severity: Severity


class Alert(AlertSubmission):
    time: str  # sellado por el servidor

    @classmethod
    def from_submission(cls, submission: AlertSubmission, time: str) -> "Alert":
        return cls(**submission.model_dump(), time=time)
