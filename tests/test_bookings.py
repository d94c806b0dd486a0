import re
import pytest
from httpx import AsyncClient
from sqlalchemy import select
from mindful_campus.bookings.service import generate_join_link
from mindful_campus.db.models import SessionBooking

JOIN_LINK_PATTERN = re.compile(r"^https://mindful-campus\.local/join/[A-Za-z0-9_-]{1,12}$")


async def stored_bookings(gateway):
    return await gateway.execute(select(SessionBooking.__table__).order_by(SessionBooking.id))


def test_generate_join_link_is_deterministic():
    link = generate_join_link("Ana", timestamp_ms=1760000000000)
    assert link == generate_join_link("Ana", timestamp_ms=1760000000000)
    assert JOIN_LINK_PATTERN.match(link)


def test_generate_join_link_token_length():
    link = generate_join_link("A very long student name", timestamp_ms=1760000000000)
    token = link.rsplit("/", 1)[1]
    assert len(token) == 12


def test_generate_join_link_custom_base_url():
    link = generate_join_link("Ana", timestamp_ms=1, base_url="https://calls.example.edu/")
    assert link.startswith("https://calls.example.edu/join/")


@pytest.mark.asyncio
async def test_book_session_success(client: AsyncClient, gateway, booking_payload):
    response = await client.post("/api/book-session", json=booking_payload)
    
    assert response.status_code == 201
    data = response.json()
    assert data["success"] is True
    assert isinstance(data["bookingId"], int)
    assert JOIN_LINK_PATTERN.match(data["joinLink"])
    assert data["message"] == "Session booked. Keep this join link for your call."
    
    rows = await stored_bookings(gateway)
    assert len(rows) == 1
    assert rows[0]["id"] == data["bookingId"]
    assert rows[0]["student_name"] == "Ana"
    assert rows[0]["therapist"] == "Dr. Ethan Miles"
    assert rows[0]["notes"] == "First session"
    assert rows[0]["join_link"] == data["joinLink"]
    assert rows[0]["created_at"] is not None


@pytest.mark.asyncio
async def test_book_session_notes_optional(client: AsyncClient, gateway, booking_payload):
    del booking_payload["notes"]
    response = await client.post("/api/book-session", json=booking_payload)
    
    assert response.status_code == 201
    rows = await stored_bookings(gateway)
    assert rows[0]["notes"] == ""


@pytest.mark.asyncio
async def test_book_session_ids_come_from_each_insert(client: AsyncClient, booking_payload):
    first = await client.post("/api/book-session", json=booking_payload)
    booking_payload["studentName"] = "Ben"
    second = await client.post("/api/book-session", json=booking_payload)
    
    assert second.json()["bookingId"] == first.json()["bookingId"] + 1


@pytest.mark.asyncio
@pytest.mark.parametrize("field", ["studentName", "email", "therapist", "sessionType", "slotTime"])
async def test_book_session_missing_field(client: AsyncClient, gateway, booking_payload, field):
    """Omitting any required field is a 400 and nothing is stored."""
    del booking_payload[field]
    response = await client.post("/api/book-session", json=booking_payload)
    
    assert response.status_code == 400
    assert response.json() == {"error": "Please fill in all required booking fields."}
    assert await stored_bookings(gateway) == []


@pytest.mark.asyncio
async def test_book_session_empty_field(client: AsyncClient, gateway, booking_payload):
    booking_payload["slotTime"] = ""
    response = await client.post("/api/book-session", json=booking_payload)
    
    assert response.status_code == 400
    assert await stored_bookings(gateway) == []


@pytest.mark.asyncio
async def test_book_session_stores_quotes_verbatim(client: AsyncClient, gateway, booking_payload):
    booking_payload["studentName"] = "O'Brien'); DROP TABLE session_bookings; --"
    response = await client.post("/api/book-session", json=booking_payload)
    
    assert response.status_code == 201
    rows = await stored_bookings(gateway)
    assert rows[0]["student_name"] == "O'Brien'); DROP TABLE session_bookings; --"


@pytest.mark.asyncio
async def test_book_session_empty_body(client: AsyncClient, gateway):
    response = await client.post("/api/book-session", content=b"", headers={"Content-Type": "application/json"})
    
    assert response.status_code == 400
    assert response.json() == {"error": "Please fill in all required booking fields."}
    assert await stored_bookings(gateway) == []
