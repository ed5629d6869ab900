import logging
from collections.abc import Awaitable, Callable

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from protestmap.config.database import async_session_manager

logger = logging.getLogger(__name__)

router = APIRouter()

StoreCheck = Callable[[], Awaitable[bool]]


class HealthCheckResponse(BaseModel):
    status: str
    database: str
    version: str = "0.1.0"


async def ping_store() -> bool:
    try:
        async with async_session_manager(auto_commit=False) as session:
            await session.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as e:
        logger.warning(f"Store health check failed: {e}")
        return False
    return True


def get_store_check() -> StoreCheck:
    """Dependency to get the store connectivity check."""
    return ping_store


@router.get("/", response_model=HealthCheckResponse)
async def health_check(
    store_check: StoreCheck = Depends(get_store_check),
) -> HealthCheckResponse:
    """
    Health check endpoint to verify the API is running and the store answers.
    """
    if await store_check():
        return HealthCheckResponse(status="healthy", database="ok")
    return HealthCheckResponse(status="degraded", database="unavailable")
