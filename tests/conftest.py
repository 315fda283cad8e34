# tests/conftest.py
from datetime import datetime, timezone

import pytest
from httpx import AsyncClient, ASGITransport
from asgi_lifespan import LifespanManager

from donation_matching.deps import get_repo
from donation_matching.main import app
from donation_matching.repos.inmemory import InMemoryRepo
from donation_matching.schemas import DonationRecord, GeoPoint, NgoProfile

# Wednesday
NOW = datetime(2024, 5, 15, 12, 0, tzinfo=timezone.utc)

def at(day: int, hour: int, minute: int = 0) -> datetime:
    return datetime(2024, 5, day, hour, minute, tzinfo=timezone.utc)

def donation(id_, food_type="Rice", quantity=10, lat=0.0, lng=0.0, start=None, end=None,
             created_at=None, status="available", ngo_id=None, city="Manila") -> DonationRecord:
    return DonationRecord(
        id=id_,
        food_type=food_type,
        quantity=quantity,
        location=GeoPoint(latitude=lat, longitude=lng),
        available_start_time=start,
        available_end_time=end,
        created_at=created_at or at(14, 9),
        status=status,
        ngo_id=ngo_id,
        city=city,
    )

@pytest.fixture(scope="session")
def anyio_backend():
    # keep AnyIO on asyncio for the whole test session
    return "asyncio"

@pytest.fixture
def now():
    return NOW

@pytest.fixture
def ngo():
    return NgoProfile(id="N1", city="Manila", location=GeoPoint(latitude=14.60, longitude=120.98))

@pytest.fixture
def repo(ngo):
    r = InMemoryRepo()
    r.add_organization(ngo)
    return r

@pytest.fixture
async def test_client(repo):
    app.dependency_overrides[get_repo] = lambda: repo
    async with LifespanManager(app):
        transport = ASGITransport(app=app, raise_app_exceptions=True)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    app.dependency_overrides.clear()

@pytest.fixture
def seeded(repo):
    """
    History for N1 (3 delivered pickups) plus a pool of candidates around it.

    Expected ranking with now=NOW: c1, c2, c3, c5, c4 (c6 drops out of the top 5);
    c7 is in another city and c8 is not available yet.
    """
    delivered = dict(status="delivered", ngo_id="N1", lat=14.60, lng=120.98)
    repo.add_donation(donation("h1", food_type="Rice", created_at=at(14, 9), **delivered))
    repo.add_donation(donation("h2", food_type="Rice", created_at=at(8, 9), **delivered))
    repo.add_donation(donation("h3", food_type="Veg", created_at=at(13, 14), **delivered))
    # delivered to someone else
    repo.add_donation(donation("h4", food_type="Cake", created_at=at(14, 18), status="delivered", ngo_id="N2"))

    repo.add_donation(donation("c1", food_type="Rice", quantity=33, lat=14.60, lng=120.98,
                               start=at(16, 9), end=at(16, 11), created_at=at(15, 8)))
    repo.add_donation(donation("c2", food_type="Veg", quantity=33, lat=14.60, lng=120.99,
                               start=at(16, 9), end=at(16, 10), created_at=at(15, 7)))
    repo.add_donation(donation("c3", food_type="Bread", quantity=33, lat=14.61, lng=120.98,
                               start=at(16, 9), end=at(16, 11), created_at=at(15, 6)))
    repo.add_donation(donation("c4", food_type="Rice", quantity=66, lat=14.70, lng=120.98,
                               start=at(16, 9), end=at(16, 10, 30), created_at=at(15, 5)))
    repo.add_donation(donation("c5", food_type="Cake", quantity=22, lat=14.60, lng=120.98,
                               start=at(16, 9, 30), end=at(16, 12), created_at=at(15, 4)))
    repo.add_donation(donation("c6", food_type="Cake", quantity=200, lat=14.60, lng=121.05,
                               created_at=at(15, 3)))
    repo.add_donation(donation("c7", food_type="Rice", quantity=33, lat=14.60, lng=120.98,
                               start=at(16, 9), end=at(16, 11), city="Cebu"))
    repo.add_donation(donation("c8", food_type="Rice", quantity=33, lat=14.60, lng=120.98,
                               start=at(16, 9), end=at(16, 11), status="pending"))
    return repo
