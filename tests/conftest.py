import os

# Keep the application engine off PostgreSQL; tests bind their own SQLite engine.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

import icetime.models  # noqa: F401
from icetime.core.database import Base, get_db
from icetime.main import app
from icetime.schemas.booking import BookingCreate
from icetime.schemas.facility import FacilityCreate
from icetime.services.facility_directory import facility_directory

TEST_FACILITIES = [
    FacilityCreate(
        facility_id="rink-1",
        name="Central Ice Arena",
        address="123 Main St",
        city="Ottawa",
        province="ON",
        postal_code="K1A 0A1",
    ),
    FacilityCreate(
        facility_id="rink-2",
        name="Northside Ice Complex",
        address="456 North Ave",
        city="Ottawa",
        province="ON",
        postal_code="K1B 0B2",
    ),
    FacilityCreate(
        facility_id="rink-3",
        name="Southgate Skating Center",
        address="789 South Blvd",
        city="Ottawa",
        province="ON",
        postal_code="K1C 0C3",
    ),
    FacilityCreate(
        facility_id="rink-closed",
        name="Old Barn Arena",
        address="1 Farm Rd",
        city="Ottawa",
        province="ON",
        postal_code="K1D 0D4",
        is_active=False,
    ),
]


def make_booking(**overrides) -> BookingCreate:
    data = {
        "facilityId": "rink-1",
        "date": "2025-06-10",
        "timeSlot": "14:00",
        "customerName": "Test User",
        "customerPhone": "613-555-1234",
    }
    data.update(overrides)
    return BookingCreate.model_validate(data)


@pytest.fixture
def booking_request():
    return make_booking


@pytest.fixture
async def engine(tmp_path):
    # On-disk database so separate sessions get separate connections
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'icetime.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def facilities(session_factory):
    async with session_factory() as session:
        for data in TEST_FACILITIES:
            await facility_directory.upsert(session, data)
    return TEST_FACILITIES


@pytest.fixture
async def db(session_factory, facilities):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory, facilities):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
