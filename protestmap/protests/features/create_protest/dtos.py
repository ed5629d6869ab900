"""DTOs for create protest feature."""

from datetime import UTC, datetime

from pydantic import BaseModel

from protestmap.protests.dtos import MissingRequiredFieldsError
from protestmap.protests.schemas import LocationSchema


class CreateProtestRequest(BaseModel):
    """Request body for adding a protest.

    Every field is optional at the schema level so that an incomplete body
    is reported as missing fields rather than as a schema error.
    """

    name: str | None = None
    description: str | None = None
    date: str | int | None = None
    location: LocationSchema | None = None

    def ensure_required_fields(self) -> None:
        missing = []
        if not self.name:
            missing.append("name")
        if not self.description:
            missing.append("description")
        if not self.date:
            missing.append("date")
        if self.location is None:
            missing.append("location")
        else:
            if self.location.lat is None:
                missing.append("location.lat")
            if self.location.lng is None:
                missing.append("location.lng")
        if missing:
            raise MissingRequiredFieldsError(missing)

    def parsed_date(self) -> datetime | str | int:
        """The date as a naive UTC or wall-clock timestamp.

        Strings with an offset are converted to UTC; datetime-local strings
        are kept as entered. Integers are epoch milliseconds. A value that
        does not parse is returned untouched.
        """
        try:
            if isinstance(self.date, int):
                return datetime.fromtimestamp(self.date / 1000, UTC).replace(tzinfo=None)
            parsed = datetime.fromisoformat(self.date)
        except (ValueError, OverflowError, OSError):
            return self.date
        if parsed.tzinfo is not None:
            parsed = parsed.astimezone(UTC).replace(tzinfo=None)
        return parsed


class CreateProtestResponse(BaseModel):
    """Response for a created protest."""

    success: bool = True
    message: str
    id: int
