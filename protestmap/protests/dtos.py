from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from protestmap.protests.repository.orm_models import Protest


class StoreError(Exception):
    """Base class for failures talking to the protests store."""


class StoreUnavailable(StoreError):
    """Raised when a connection to the store cannot be established."""


class QueryFailed(StoreError):
    """Raised when the store rejects or fails to execute a statement."""


class MissingRequiredFieldsError(Exception):
    """Raised when a create request lacks a required field."""

    def __init__(self, fields: list[str]) -> None:
        self.fields = fields
        super().__init__(f"Missing required fields: {', '.join(fields)}")


@dataclass(frozen=True)
class LocationDTO:
    """Coordinates of a protest. Both values are set or both are None."""

    lat: float | None = None
    lng: float | None = None

    @classmethod
    def from_columns(cls, lat: float | None, lng: float | None) -> "LocationDTO":
        if lat is None or lng is None:
            return cls()
        return cls(lat=float(lat), lng=float(lng))

    @property
    def is_complete(self) -> bool:
        return self.lat is not None and self.lng is not None


@dataclass(frozen=True)
class ProtestDTO:
    id: int
    name: str
    description: str
    date: datetime | None
    location: LocationDTO

    @classmethod
    def from_protest(cls, protest: "Protest") -> "ProtestDTO":
        return cls(
            id=protest.id,
            name=protest.name,
            description=protest.description,
            date=protest.start_date,
            location=LocationDTO.from_columns(protest.lat, protest.lng),
        )
