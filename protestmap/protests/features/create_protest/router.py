import logging

from fastapi import APIRouter, Depends, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from protestmap.protests.dtos import MissingRequiredFieldsError, StoreError
from protestmap.protests.features.create_protest.dtos import (
    CreateProtestRequest,
    CreateProtestResponse,
)
from protestmap.protests.features.create_protest.write_model import (
    ProtestCreateWriteModel,
    SqlProtestCreateWriteModel,
)
from protestmap.protests.schemas import GENERIC_ERROR_MESSAGE, ErrorResponse
from protestmap.protests.urls import PROTESTS_URL

logger = logging.getLogger(__name__)

router = APIRouter()


def get_protest_create_write_model() -> ProtestCreateWriteModel:
    """Dependency to get protest create write model instance."""
    return SqlProtestCreateWriteModel()


def error_response(status_code: int, error: str, message: str | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=error, message=message).model_dump(exclude_none=True),
    )


async def protests_validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed protest bodies as 400 instead of FastAPI's 422."""
    if request.url.path != PROTESTS_URL:
        return await request_validation_exception_handler(request, exc)
    logger.info(f"Rejected malformed protest body: {exc.errors()}")
    return error_response(400, "Invalid request body")


@router.post(
    PROTESTS_URL,
    status_code=201,
    response_model=CreateProtestResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def create_protest(
    request: CreateProtestRequest,
    write_model: ProtestCreateWriteModel = Depends(get_protest_create_write_model),
):
    """
    Add a protest to the map.

    name, description, date and both coordinates are required.
    """
    try:
        request.ensure_required_fields()
    except MissingRequiredFieldsError as e:
        logger.info(f"Rejected protest: missing {e.fields}")
        return error_response(400, "Missing required fields")

    try:
        protest_id = await write_model.create_protest(
            name=request.name,
            description=request.description,
            lat=request.location.lat,
            lng=request.location.lng,
            start_date=request.parsed_date(),
        )
    except StoreError:
        logger.exception("Failed to add protest")
        return error_response(500, "Failed to add protest", GENERIC_ERROR_MESSAGE)

    return CreateProtestResponse(
        success=True,
        message="Protest added successfully",
        id=protest_id,
    )
