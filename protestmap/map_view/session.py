import logging

from protestmap.map_view import state as map_state
from protestmap.map_view.client import ClientNetworkError, ProtestsApiClient
from protestmap.map_view.markers import Marker, markers_from_protests

logger = logging.getLogger(__name__)

SUBMIT_FAILED_ALERT = "Olay eklerken bir hata oluştu."
NETWORK_ERROR_ALERT = "Sunucuya ulaşılamadı."


class MapSession:
    """Drives the map interaction state against the protests API.

    Mirrors what the browser page does: holds the current state snapshot and
    the rendered markers, and records the alerts the page would show.
    """

    def __init__(self, client: ProtestsApiClient, reopen_form_on_cancel: bool = False):
        self.client = client
        self.reopen_form_on_cancel = reopen_form_on_cancel
        self.state: map_state.MapState = map_state.initial_state()
        self.markers: list[Marker] = []
        self.alerts: list[str] = []

    async def load(self) -> list[Marker]:
        try:
            protests = await self.client.list_protests()
        except ClientNetworkError as e:
            logger.error(f"Failed to load protests: {e}")
            self.alerts.append(NETWORK_ERROR_ALERT)
            return self.markers
        self.markers = markers_from_protests(protests)
        return self.markers

    def open_form(self) -> None:
        self.state = map_state.open_form(self.state)

    def close_form(self) -> None:
        self.state = map_state.close_form(self.state)

    def edit(self, **fields) -> None:
        self.state = map_state.update_draft(self.state, **fields)

    def start_picking(self) -> None:
        self.state = map_state.start_picking(self.state)

    def map_clicked(self, lat: float, lng: float) -> None:
        self.state = map_state.pick_location(self.state, lat, lng)

    def cancel_picking(self) -> None:
        self.state = map_state.cancel_picking(
            self.state, reopen_form=self.reopen_form_on_cancel
        )

    async def submit(self) -> bool:
        """Post the draft. Returns True when the protest was saved."""
        if not map_state.can_submit(self.state):
            return False

        succeeded = False
        try:
            response = await self.client.create_protest(self.state.draft.to_payload())
        except ClientNetworkError as e:
            logger.error(f"Error submitting protest: {e}")
            self.alerts.append(NETWORK_ERROR_ALERT)
        else:
            if response.is_success:
                succeeded = True
            else:
                logger.warning(f"Protest rejected with status {response.status_code}")
                self.alerts.append(SUBMIT_FAILED_ALERT)

        self.state = map_state.finish_submit(self.state, succeeded)
        if succeeded:
            await self.load()
        return succeeded
