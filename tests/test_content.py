"""
Tests for daily notes, quotes and directories
"""
import pytest
from datetime import datetime, timedelta, timezone
from httpx import AsyncClient
from mindful_campus.content.provider import ContentProvider
from mindful_campus.utils.timezone import unix_day


@pytest.fixture
def provider():
    return ContentProvider()


def test_unix_day_boundary():
    last_second = datetime(2026, 10, 19, 23, 59, 59, tzinfo=timezone.utc)
    assert unix_day(last_second) + 1 == unix_day(last_second + timedelta(seconds=1))


def test_unix_day_treats_naive_as_utc():
    assert unix_day(datetime(1970, 1, 2)) == 1


def test_daily_note_stable_within_day(provider):
    start_of_day = datetime(2026, 10, 19, 0, 0, 0, tzinfo=timezone.utc)
    note = provider.get_daily_note(start_of_day)
    for hours in (1, 6, 12, 23):
        assert provider.get_daily_note(start_of_day + timedelta(hours=hours)) == note
    assert provider.get_daily_note(start_of_day + timedelta(hours=23, minutes=59, seconds=59)) == note


def test_daily_note_rotates_at_midnight_utc(provider):
    last_second = datetime(2026, 10, 19, 23, 59, 59, tzinfo=timezone.utc)
    first_second = last_second + timedelta(seconds=1)
    
    today = provider.get_daily_note(last_second)
    tomorrow = provider.get_daily_note(first_second)
    
    assert today != tomorrow
    index = provider.daily_notes.index(today)
    assert tomorrow == provider.daily_notes[(index + 1) % len(provider.daily_notes)]


def test_daily_note_index_from_epoch_day(provider):
    moment = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)
    expected = provider.daily_notes[int(moment.timestamp()) // 86400 % len(provider.daily_notes)]
    assert provider.get_daily_note(moment) == expected


def test_random_quote_from_list(provider):
    for _ in range(20):
        assert provider.random_quote() in provider.quotes


def test_directories(provider):
    therapists = provider.list_therapists()
    assert len(therapists) == 3
    for therapist in therapists:
        assert set(therapist) == {"name", "specialization", "availability"}
    
    helplines = provider.list_helplines()
    assert {"country": "USA & Canada", "number": "988 (Suicide & Crisis Lifeline 24/7)"} in helplines


def test_directories_are_copies(provider):
    provider.list_therapists()[0]["name"] = "changed"
    assert provider.list_therapists()[0]["name"] == "Dr. Aisha Rahman"


@pytest.mark.asyncio
async def test_config_endpoint(client: AsyncClient):
    response = await client.get("/api/config")
    
    assert response.status_code == 200
    data = response.json()
    provider = ContentProvider()
    assert data["dailyNote"] == provider.get_daily_note()
    assert data["quote"] in provider.quotes
    assert data["therapists"] == provider.list_therapists()
    assert data["helplines"] == provider.list_helplines()
