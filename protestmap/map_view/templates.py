import json
from dataclasses import dataclass

from protestmap.map_view.markers import Marker
from protestmap.map_view.session import NETWORK_ERROR_ALERT, SUBMIT_FAILED_ALERT
from protestmap.map_view.state import Draft
from protestmap.protests.urls import PROTESTS_URL


def _script_json(value) -> str:
    # Safe to inline inside a <script> element.
    return json.dumps(value, ensure_ascii=False).replace("<", "\\u003c")


@dataclass
class MapTemplates:
    LEAFLET_VERSION = "1.9.4"

    PAGE_HTML = """<!DOCTYPE html>
<html lang="tr">
<head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Olay Haritası</title>
    <link rel="stylesheet" href="https://unpkg.com/leaflet@{leaflet_version}/dist/leaflet.css">
    <link rel="stylesheet" href="{static_url}/map.css">
</head>
<body>
    <div id="map"></div>

    <button id="add-event" type="button">Olay ekle</button>

    <div id="picking-banner" hidden>
        Konum seçmek için haritaya tıklayın
        <button id="cancel-picking" type="button">İptal</button>
    </div>

    <div id="form-modal" class="modal" hidden>
        <div class="modal-body">
            <h2>Yeni Olay Ekle</h2>
            <form id="event-form">
                <label for="event-name">İsim</label>
                <input id="event-name" name="name" type="text" required>

                <label for="event-description">Açıklama</label>
                <textarea id="event-description" name="description" rows="3" required></textarea>

                <label for="event-date">Tarih</label>
                <input id="event-date" name="date" type="datetime-local" required>

                <label>Konum</label>
                <div class="location-row">
                    <button id="pick-on-map" type="button" class="secondary">Haritada Seç</button>
                    <span id="location-label" class="missing">Konum seçilmedi</span>
                </div>

                <div class="actions">
                    <button id="cancel-form" type="button" class="secondary">İptal</button>
                    <button id="submit-form" type="submit" disabled>Kaydet</button>
                </div>
            </form>
        </div>
    </div>

    <script id="map-config" type="application/json">{config_json}</script>
    <script id="map-markers" type="application/json">{markers_json}</script>
    <script src="https://unpkg.com/leaflet@{leaflet_version}/dist/leaflet.js"></script>
    <script src="{static_url}/map.js"></script>
</body>
</html>
"""

    @classmethod
    def render_page(
        cls,
        markers: list[Marker],
        center: tuple[float, float],
        zoom: int,
        tile_url: str,
        static_url: str = "/static",
    ) -> str:
        config = {
            "center": list(center),
            "zoom": zoom,
            "tileUrl": tile_url,
            "apiUrl": PROTESTS_URL,
            "leafletVersion": cls.LEAFLET_VERSION,
            "draft": Draft().to_payload(),
            "alerts": {
                "submitFailed": SUBMIT_FAILED_ALERT,
                "networkError": NETWORK_ERROR_ALERT,
            },
        }
        return cls.PAGE_HTML.format(
            leaflet_version=cls.LEAFLET_VERSION,
            static_url=static_url,
            config_json=_script_json(config),
            markers_json=_script_json([marker.to_dict() for marker in markers]),
        )
