"""Write model for creating protests.

Inserts a single row into the protests table and returns the id the store
generated for it.
"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from functools import partial

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from protestmap.config.database import async_session_manager
from protestmap.protests.dtos import QueryFailed
from protestmap.protests.repository.orm_models import Protest

logger = logging.getLogger(__name__)


class ProtestCreateWriteModel(ABC):
    """Abstract base class for protest creation write operations."""

    @abstractmethod
    async def create_protest(
        self,
        name: str,
        description: str,
        lat: float,
        lng: float,
        start_date: datetime | str,
    ) -> int:
        """Create a new protest. Returns the generated id.

        Args:
            name: Name shown in the marker popup
            description: Free text description
            lat: Latitude of the protest
            lng: Longitude of the protest
            start_date: When the protest starts. A string is handed to the
                store untouched and is expected to be rejected by it.

        Raises:
            QueryFailed: the store could not be reached or refused the row
        """
        raise NotImplementedError


class SqlProtestCreateWriteModel(ProtestCreateWriteModel):
    """SQL implementation of protest creation write operations."""

    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def create_protest(
        self,
        name: str,
        description: str,
        lat: float,
        lng: float,
        start_date: datetime | str,
    ) -> int:
        try:
            async with self.async_session_manager(
                session_overwrite=self.session_overwrite
            ) as session:
                protest = Protest(
                    name=name,
                    description=description,
                    lat=lat,
                    lng=lng,
                    start_date=start_date,
                )
                session.add(protest)
                await session.flush()
                protest_id = protest.id
        except (SQLAlchemyError, OSError) as e:
            raise QueryFailed(str(e)) from e

        logger.info(f"Created protest {protest_id}")
        return protest_id
