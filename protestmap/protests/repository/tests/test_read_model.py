"""Tests for SqlProtestReadModel."""

from datetime import datetime

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine

from protestmap.config.database import async_session_manager, engine
from protestmap.models.base import BaseModel
from protestmap.protests.dtos import LocationDTO, QueryFailed, StoreUnavailable
from protestmap.protests.repository.orm_models import Protest
from protestmap.protests.repository.read_models import SqlProtestReadModel


async def add_protests(*protests: Protest) -> None:
    async with async_session_manager() as session:
        session.add_all(protests)


async def test_list_protests_empty(test_db):
    assert await SqlProtestReadModel().list_protests() == []


async def test_list_protests_maps_columns(test_db):
    await add_protests(
        Protest(
            name="Rally",
            description="Peaceful",
            lat=41.01,
            lng=28.98,
            start_date=datetime(2024, 5, 1, 10, 0),
            end_date=datetime(2024, 5, 1, 18, 0),
        )
    )

    [protest] = await SqlProtestReadModel().list_protests()

    assert protest.id is not None
    assert protest.name == "Rally"
    assert protest.description == "Peaceful"
    assert protest.date == datetime(2024, 5, 1, 10, 0)
    assert protest.location == LocationDTO(lat=41.01, lng=28.98)


async def test_list_protests_never_mixes_coordinates(test_db):
    """Rows holding a single coordinate come back with neither."""
    await add_protests(
        Protest(name="Only lat", description="x", lat=41.0, lng=None),
        Protest(name="Only lng", description="x", lat=None, lng=29.0),
        Protest(name="Neither", description="x", lat=None, lng=None),
        Protest(name="Both", description="x", lat=0.0, lng=0.0),
    )

    protests = {p.name: p for p in await SqlProtestReadModel().list_protests()}

    assert protests["Only lat"].location == LocationDTO()
    assert protests["Only lng"].location == LocationDTO()
    assert protests["Neither"].location == LocationDTO()
    assert protests["Both"].location == LocationDTO(lat=0.0, lng=0.0)
    for protest in protests.values():
        assert (protest.location.lat is None) == (protest.location.lng is None)


async def test_list_protests_in_given_session(db_session):
    db_session.add(Protest(name="Uncommitted", description="x", lat=1.0, lng=2.0))
    await db_session.flush()

    protests = await SqlProtestReadModel(session_overwrite=db_session).list_protests()

    assert [p.name for p in protests] == ["Uncommitted"]


async def test_list_protests_missing_table(test_db):
    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.drop_all)

    with pytest.raises(QueryFailed):
        await SqlProtestReadModel().list_protests()


async def test_list_protests_unreachable_store(tmp_path):
    bad_engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path}/missing/dir/protests.db")
    try:
        async with AsyncSession(bad_engine) as session:
            with pytest.raises(StoreUnavailable):
                await SqlProtestReadModel(session_overwrite=session).list_protests()
    finally:
        await bad_engine.dispose()
