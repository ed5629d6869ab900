import abc
import logging
from functools import partial

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from protestmap.config.database import async_session_manager
from protestmap.protests.dtos import ProtestDTO, QueryFailed, StoreUnavailable
from protestmap.protests.repository.orm_models import Protest

logger = logging.getLogger(__name__)


class ProtestReadModel(abc.ABC):
    @abc.abstractmethod
    async def list_protests(self) -> list[ProtestDTO]:
        """
        Get every stored protest, in no particular order.
        Raises StoreUnavailable or QueryFailed when the store cannot answer.
        """
        raise NotImplementedError


class SqlProtestReadModel(ProtestReadModel):
    """SQL implementation of the protest read model."""

    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def list_protests(self) -> list[ProtestDTO]:
        async with self.async_session_manager(
            auto_commit=False, session_overwrite=self.session_overwrite
        ) as session:
            await self._connect(session)
            try:
                result = await session.execute(select(Protest))
                protests = result.scalars().all()
            except SQLAlchemyError as e:
                raise QueryFailed(str(e)) from e

            logger.debug(f"Loaded {len(protests)} protests")
            return [ProtestDTO.from_protest(protest) for protest in protests]

    @staticmethod
    async def _connect(session: AsyncSession) -> None:
        try:
            await session.connection()
        except (SQLAlchemyError, OSError) as e:
            raise StoreUnavailable(str(e)) from e
