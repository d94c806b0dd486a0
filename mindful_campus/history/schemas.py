"""History Pydantic schemas"""
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel


class BookingHistoryItem(BaseModel):
    id: int
    student_name: str
    email: str
    therapist: str
    session_type: str
    slot_time: str
    join_link: str
    created_at: datetime


class MentalTestHistoryItem(BaseModel):
    id: int
    student_name: str
    email: Optional[str] = None
    average_score: float
    wellness_state: str
    created_at: datetime


class HistoryResponse(BaseModel):
    """Most recent bookings and test results, newest first"""
    bookings: List[BookingHistoryItem]
    tests: List[MentalTestHistoryItem]
