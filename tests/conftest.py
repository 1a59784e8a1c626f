"""Shared fixtures: in-memory SQLite database and an ASGI client on the app."""
import os

os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ.setdefault("SEED_DEFAULT_TEMPLATES", "true")

import httpx
import pytest

from app.database import async_session_factory, engine, init_db
from app.main import app, seed_templates


@pytest.fixture
async def database():
    """Fresh schema per test. Disposing the engine drops the in-memory database."""
    await init_db()
    await seed_templates()
    yield
    await engine.dispose()


@pytest.fixture
async def db(database):
    async with async_session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
async def client(database):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


# ==================== Payload helpers ====================

def group_payload(name="L0 Group", **overrides):
    payload = {
        "name": name,
        "storageInstruction": "L0",
        "locationInstruction": "BIN",
        "storageIdentifiers": {},
        "lineIdentifiers": {},
    }
    payload.update(overrides)
    return payload


def pick_strategy_payload(group_id, **overrides):
    payload = {
        "inventoryGroupId": group_id,
        "taskKind": "OUTBOUND_PICK",
        "strategy": "OPTIMIZE_PICK_PATH",
        "sortingStrategy": "BY_LOCATION",
        "loadingStrategy": "LOAD_BY_LM_TRIP",
        "taskLabel": "L0 picking",
    }
    payload.update(overrides)
    return payload


def hu_formation_payload(**overrides):
    payload = {
        "tripType": "LM",
        "huKinds": ["PALLET"],
        "scanSourceHUKind": "NONE",
        "pickSourceHUKind": "NONE",
        "carrierHUKind": "PALLET",
        "huMappingMode": "BIN",
        "dropUOM": "L0",
        "dropSlottingMode": "BIN",
    }
    payload.update(overrides)
    return payload
