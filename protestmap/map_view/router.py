import logging

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from protestmap.config.settings import settings
from protestmap.map_view.markers import markers_from_protests
from protestmap.map_view.templates import MapTemplates
from protestmap.protests.dtos import StoreError
from protestmap.protests.features.list_protests.router import get_protest_read_model
from protestmap.protests.repository.read_models import ProtestReadModel
from protestmap.protests.schemas import ProtestResponse

logger = logging.getLogger(__name__)

router = APIRouter()

MAP_PAGE_URL = "/"


@router.get(MAP_PAGE_URL, response_class=HTMLResponse)
async def map_page(
    read_model: ProtestReadModel = Depends(get_protest_read_model),
) -> HTMLResponse:
    """Render the map with every protest that has a location."""
    try:
        protests = await read_model.list_protests()
    except StoreError:
        logger.exception("Failed to load protests for the map page")
        protests = []

    markers = markers_from_protests(
        ProtestResponse.from_dto(protest).model_dump(mode="json") for protest in protests
    )
    return HTMLResponse(
        MapTemplates.render_page(
            markers=markers,
            center=(settings.map_center_lat, settings.map_center_lng),
            zoom=settings.map_zoom,
            tile_url=settings.map_tile_url,
        )
    )
