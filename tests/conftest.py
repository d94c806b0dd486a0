import pytest
from httpx import AsyncClient, ASGITransport
from mindful_campus.main import app
from mindful_campus.db.gateway import PersistenceGateway, get_gateway


@pytest.fixture(scope="function")
async def gateway(tmp_path):
    """Gateway on a fresh SQLite file for each test."""
    test_gateway = PersistenceGateway(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await test_gateway.create_schema()
    yield test_gateway
    await test_gateway.dispose()


@pytest.fixture(scope="function")
async def client(gateway, monkeypatch):
    """Create a test client with the gateway dependency overridden."""
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    
    app.dependency_overrides[get_gateway] = lambda: gateway
    
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    
    app.dependency_overrides.clear()


@pytest.fixture
def booking_payload():
    return {
        "studentName": "Ana",
        "email": "ana@example.edu",
        "therapist": "Dr. Ethan Miles",
        "sessionType": "Video call",
        "slotTime": "2026-10-20T10:00",
        "notes": "First session",
    }


@pytest.fixture
def calm_answers():
    return {
        "stressLevel": 4,
        "sleepQuality": 4,
        "supportLevel": 5,
        "moodStability": 4,
        "focusLevel": 4,
    }
