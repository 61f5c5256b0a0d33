from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, field_validator


def parse_due_date(value: str) -> datetime:
    """Parse an ISO-8601 date or date-time string ("Z" suffix included)."""
    return datetime.fromisoformat(value)


def to_local(parsed: datetime) -> datetime:
    """Naive values are already local; aware values are converted.

    Raises OverflowError when the conversion leaves the datetime range.
    """
    if parsed.tzinfo is not None:
        return parsed.astimezone()
    return parsed


def local_calendar_date(value: str) -> date | None:
    """Calendar date of an ISO-8601 value in the server's local time zone.

    None when the value cannot be placed on the local calendar.
    """
    try:
        return to_local(parse_due_date(value)).date()
    except (ValueError, OverflowError):
        return None


def _validate_iso(value: str | None) -> str | None:
    if value:
        try:
            to_local(parse_due_date(value))
        except (ValueError, OverflowError) as exc:
            raise ValueError("dueDate must be an ISO-8601 date-time string") from exc
    return value


class Reminder(BaseModel):
    model_config = ConfigDict(strict=True)

    id: StrictStr = Field(..., min_length=1)
    title: StrictStr = Field(..., min_length=1)
    description: StrictStr = Field(..., min_length=1)
    dueDate: StrictStr = Field(..., min_length=1, description="ISO-8601 date-time")
    isCompleted: StrictBool

    @property
    def due_on(self) -> date | None:
        return local_calendar_date(self.dueDate)


class ReminderCreate(Reminder):
    """Create payload. Every field is required; isCompleted must be a real boolean."""

    @field_validator("dueDate")
    @classmethod
    def validate_due_date(cls, v: str) -> str:
        return _validate_iso(v)

    def to_reminder(self) -> Reminder:
        return Reminder.model_validate(self.model_dump())


class ReminderUpdate(BaseModel):
    """Partial update payload.

    Absent or null fields are left untouched. Empty strings are also ignored
    for the text fields, while isCompleted=false is a real change.
    """

    model_config = ConfigDict(strict=True)

    title: StrictStr | None = None
    description: StrictStr | None = None
    dueDate: StrictStr | None = None
    isCompleted: StrictBool | None = None

    @field_validator("dueDate")
    @classmethod
    def validate_due_date(cls, v: str | None) -> str | None:
        return _validate_iso(v)

    def changes(self) -> dict[str, str | bool]:
        fields = {
            name: value
            for name, value in (
                ("title", self.title),
                ("description", self.description),
                ("dueDate", self.dueDate),
            )
            if value
        }
        if self.isCompleted is not None:
            fields["isCompleted"] = self.isCompleted
        return fields


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
