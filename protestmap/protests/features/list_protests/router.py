import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from protestmap.protests.dtos import StoreError
from protestmap.protests.repository.read_models import ProtestReadModel, SqlProtestReadModel
from protestmap.protests.schemas import GENERIC_ERROR_MESSAGE, ErrorResponse, ProtestResponse
from protestmap.protests.urls import PROTESTS_URL

logger = logging.getLogger(__name__)

router = APIRouter()


def get_protest_read_model() -> ProtestReadModel:
    """Dependency to get protest read model instance."""
    return SqlProtestReadModel()


@router.get(
    PROTESTS_URL,
    response_model=list[ProtestResponse],
    responses={500: {"model": ErrorResponse}},
)
async def list_protests(
    read_model: ProtestReadModel = Depends(get_protest_read_model),
):
    """
    Get every protest with its location.
    Locations without both coordinates are served as null/null.
    """
    try:
        protests = await read_model.list_protests()
    except StoreError:
        logger.exception("Failed to fetch protests")
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(
                error="Failed to fetch data", message=GENERIC_ERROR_MESSAGE
            ).model_dump(),
        )

    return [ProtestResponse.from_dto(protest) for protest in protests]
