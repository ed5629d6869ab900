from collections.abc import Iterable, Mapping
from dataclasses import asdict, dataclass
from datetime import datetime
from numbers import Real

POPUP_DATE_FORMAT = "%d.%m.%Y %H:%M:%S"


@dataclass(frozen=True)
class Popup:
    name: str
    description: str
    date: str


@dataclass(frozen=True)
class Marker:
    id: int
    lat: float
    lng: float
    popup: Popup

    def to_dict(self) -> dict:
        return asdict(self)


def format_popup_date(value: str | datetime | None) -> str:
    """Format a protest date the way the popup shows it (tr-TR style)."""
    if value is None:
        return ""
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError:
            return value
    return value.strftime(POPUP_DATE_FORMAT)


def _is_number(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def markers_from_protests(protests: Iterable[Mapping]) -> list[Marker]:
    """Build one marker per protest that has numeric coordinates.

    Protests are in their API representation. Ones without a usable
    location are skipped.
    """
    markers = []
    for protest in protests:
        location = protest.get("location")
        if not isinstance(location, Mapping):
            continue
        lat, lng = location.get("lat"), location.get("lng")
        if not (_is_number(lat) and _is_number(lng)):
            continue
        markers.append(
            Marker(
                id=protest.get("id"),
                lat=float(lat),
                lng=float(lng),
                popup=Popup(
                    name=protest.get("name", ""),
                    description=protest.get("description", ""),
                    date=format_popup_date(protest.get("date")),
                ),
            )
        )
    return markers
