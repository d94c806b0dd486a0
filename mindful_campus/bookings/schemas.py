"""Session booking Pydantic schemas"""
from typing import Optional
from pydantic import BaseModel


class BookSessionRequest(BaseModel):
    """Request to book a therapy session; required fields are checked by the service"""
    studentName: Optional[str] = None
    email: Optional[str] = None
    therapist: Optional[str] = None
    sessionType: Optional[str] = None
    slotTime: Optional[str] = None
    notes: Optional[str] = None


class BookSessionResponse(BaseModel):
    success: bool = True
    bookingId: int
    joinLink: str
    message: str
