"""End-to-end tests for the protests API against the SQL models."""

import asyncio

import pytest

from protestmap.protests.urls import PROTESTS_URL


@pytest.mark.asyncio
async def test_created_protest_is_listed(client):
    body = {
        "name": "Rally",
        "description": "Peaceful",
        "date": "2024-05-01T10:00",
        "location": {"lat": 41.01, "lng": 28.98},
    }

    created = await client.post(PROTESTS_URL, json=body)
    assert created.status_code == 201
    protest_id = created.json()["id"]

    listed = await client.get(PROTESTS_URL)
    assert listed.status_code == 200
    [protest] = [p for p in listed.json() if p["id"] == protest_id]
    assert protest["name"] == "Rally"
    assert protest["description"] == "Peaceful"
    assert protest["date"] == "2024-05-01T10:00:00"
    assert protest["location"]["lat"] == pytest.approx(41.01)
    assert protest["location"]["lng"] == pytest.approx(28.98)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("sent_date", "listed_date"),
    [
        ("2024-05-01T10:00:00+03:00", "2024-05-01T07:00:00"),
        ("2024-05-01T10:00:00Z", "2024-05-01T10:00:00"),
        ("2024-05-01T10:00:00-02:30", "2024-05-01T12:30:00"),
        (1714557600000, "2024-05-01T10:00:00"),
    ],
)
async def test_dates_with_offset_are_stored_as_utc(client, sent_date, listed_date):
    body = {
        "name": "Rally",
        "description": "Peaceful",
        "date": sent_date,
        "location": {"lat": 41.01, "lng": 28.98},
    }

    created = await client.post(PROTESTS_URL, json=body)
    assert created.status_code == 201

    [protest] = (await client.get(PROTESTS_URL)).json()
    assert protest["date"] == listed_date


@pytest.mark.asyncio
async def test_rejected_protest_is_not_persisted(client):
    body = {
        "name": "Rally",
        "description": "Peaceful",
        "date": "2024-05-01T10:00",
        "location": {"lat": None, "lng": 28.98},
    }

    response = await client.post(PROTESTS_URL, json=body)
    assert response.status_code == 400

    listed = await client.get(PROTESTS_URL)
    assert listed.json() == []


@pytest.mark.asyncio
async def test_unparseable_date_is_refused_by_store(client):
    body = {
        "name": "Rally",
        "description": "Peaceful",
        "date": "not a date",
        "location": {"lat": 41.01, "lng": 28.98},
    }

    response = await client.post(PROTESTS_URL, json=body)

    assert response.status_code == 500
    assert response.json() == {
        "error": "Failed to add protest",
        "message": "An internal error occurred",
    }
    assert (await client.get(PROTESTS_URL)).json() == []


@pytest.mark.asyncio
async def test_concurrent_posts_get_distinct_ids(client):
    bodies = [
        {
            "name": f"Rally {i}",
            "description": "Peaceful",
            "date": "2024-05-01T10:00",
            "location": {"lat": 41.0 + i, "lng": 28.0 + i},
        }
        for i in range(4)
    ]

    responses = await asyncio.gather(*(client.post(PROTESTS_URL, json=b) for b in bodies))

    assert [r.status_code for r in responses] == [201] * 4
    ids = {r.json()["id"] for r in responses}
    assert len(ids) == 4

    listed = await client.get(PROTESTS_URL)
    assert {p["id"] for p in listed.json()} == ids
