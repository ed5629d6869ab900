"""Wire schemas shared by the protests endpoints."""

from datetime import datetime

from pydantic import BaseModel

from protestmap.protests.dtos import LocationDTO, ProtestDTO

GENERIC_ERROR_MESSAGE = "An internal error occurred"


class LocationSchema(BaseModel):
    lat: float | None = None
    lng: float | None = None

    @classmethod
    def from_dto(cls, location: LocationDTO) -> "LocationSchema":
        return cls(lat=location.lat, lng=location.lng)


class ProtestResponse(BaseModel):
    """A protest as served to the map."""

    id: int
    name: str
    description: str
    date: datetime | None = None
    location: LocationSchema

    @classmethod
    def from_dto(cls, protest: ProtestDTO) -> "ProtestResponse":
        return cls(
            id=protest.id,
            name=protest.name,
            description=protest.description,
            date=protest.date,
            location=LocationSchema.from_dto(protest.location),
        )


class ErrorResponse(BaseModel):
    error: str
    message: str | None = None
