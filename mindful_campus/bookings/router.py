from typing import Optional
from fastapi import APIRouter, Depends, status
from mindful_campus.db.gateway import PersistenceGateway, get_gateway
from mindful_campus.bookings.repository import BookingRepository
from mindful_campus.bookings.service import BookingService, BOOKING_CONFIRMATION
from mindful_campus.bookings.schemas import BookSessionRequest, BookSessionResponse

router = APIRouter(
    prefix="/api",
    tags=["bookings"],
)


@router.post("/book-session", response_model=BookSessionResponse, status_code=status.HTTP_201_CREATED)
async def book_session(
    request: Optional[BookSessionRequest] = None,
    gateway: PersistenceGateway = Depends(get_gateway),
):
    """
    Book a therapy session and return its join link.
    
    Required: studentName, email, therapist, sessionType, slotTime.
    The therapist is not checked against the directory.
    """
    request = request or BookSessionRequest()
    service = BookingService(BookingRepository(gateway))
    
    booking_id, join_link = await service.book(
        student_name=request.studentName,
        email=request.email,
        therapist=request.therapist,
        session_type=request.sessionType,
        slot_time=request.slotTime,
        notes=request.notes,
    )
    
    return BookSessionResponse(
        bookingId=booking_id,
        joinLink=join_link,
        message=BOOKING_CONFIRMATION,
    )
