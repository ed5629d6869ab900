"""Interaction state of the map page.

The page is always in exactly one of three states, each carrying the draft
of the protest being entered:

    Idle             form closed, map clicks ignored
    FormOpen         modal form shown, fields editable
    PickingLocation  form hidden, banner shown, next map click sets location

States are immutable. Every reducer takes a state and returns the next one;
a transition that is not allowed from the given state returns it unchanged.
"""

from dataclasses import dataclass, field, replace
from datetime import UTC, datetime

DRAFT_DATE_FORMAT = "%Y-%m-%dT%H:%M"


def default_draft_date() -> str:
    return datetime.now(UTC).strftime(DRAFT_DATE_FORMAT)


@dataclass(frozen=True)
class DraftLocation:
    lat: float | None = None
    lng: float | None = None

    @property
    def is_complete(self) -> bool:
        return self.lat is not None and self.lng is not None


@dataclass(frozen=True)
class Draft:
    name: str = ""
    description: str = ""
    date: str = field(default_factory=default_draft_date)
    location: DraftLocation = field(default_factory=DraftLocation)

    def to_payload(self) -> dict:
        """Body for the create endpoint."""
        return {
            "name": self.name,
            "description": self.description,
            "date": self.date,
            "location": {"lat": self.location.lat, "lng": self.location.lng},
        }


@dataclass(frozen=True)
class Idle:
    draft: Draft = field(default_factory=Draft)


@dataclass(frozen=True)
class FormOpen:
    draft: Draft


@dataclass(frozen=True)
class PickingLocation:
    draft: Draft


MapState = Idle | FormOpen | PickingLocation


def initial_state() -> MapState:
    return Idle()


def open_form(state: MapState) -> MapState:
    if isinstance(state, Idle):
        return FormOpen(state.draft)
    return state


def close_form(state: MapState) -> MapState:
    if isinstance(state, FormOpen):
        return Idle(state.draft)
    return state


def update_draft(
    state: MapState,
    *,
    name: str | None = None,
    description: str | None = None,
    date: str | None = None,
) -> MapState:
    if not isinstance(state, FormOpen):
        return state
    changes = {
        key: value
        for key, value in (("name", name), ("description", description), ("date", date))
        if value is not None
    }
    return FormOpen(replace(state.draft, **changes))


def start_picking(state: MapState) -> MapState:
    if isinstance(state, FormOpen):
        return PickingLocation(state.draft)
    return state


def pick_location(state: MapState, lat: float, lng: float) -> MapState:
    if not isinstance(state, PickingLocation):
        return state
    draft = replace(state.draft, location=DraftLocation(lat=lat, lng=lng))
    return FormOpen(draft)


def cancel_picking(state: MapState, reopen_form: bool = False) -> MapState:
    """Leave picking mode without a location.

    By default the page goes back to Idle with the draft kept, which is how
    the banner's cancel button has always behaved. Pass reopen_form=True to
    return to the form instead.
    """
    if not isinstance(state, PickingLocation):
        return state
    if reopen_form:
        return FormOpen(state.draft)
    return Idle(state.draft)


def can_submit(state: MapState) -> bool:
    return isinstance(state, FormOpen) and state.draft.location.is_complete


def finish_submit(state: MapState, succeeded: bool) -> MapState:
    """Close the form after a submit attempt.

    A saved protest starts a fresh draft; a failed one keeps the draft so
    the user can try again.
    """
    if not isinstance(state, FormOpen):
        return state
    if succeeded:
        return Idle()
    return Idle(state.draft)
