"""Session booking service layer"""
import base64
import logging
import time
from typing import Optional, Tuple
from mindful_campus import config
from mindful_campus.bookings.repository import BookingRepository
from mindful_campus.exceptions import ValidationError

logger = logging.getLogger(__name__)

JOIN_TOKEN_LENGTH = 12
BOOKING_CONFIRMATION = "Session booked. Keep this join link for your call."


def generate_join_link(
    student_name: str,
    timestamp_ms: Optional[int] = None,
    base_url: Optional[str] = None,
) -> str:
    """
    Build a join link from the student name and the booking time.
    
    The token is the URL-safe base64 of "<name>-<epoch millis>" cut to
    12 characters. Uniqueness is not enforced.
    """
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    if base_url is None:
        base_url = config.JOIN_LINK_BASE_URL
    
    raw = f"{student_name}-{timestamp_ms}".encode("utf-8")
    token = base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")[:JOIN_TOKEN_LENGTH]
    return f"{base_url.rstrip('/')}/join/{token}"


class BookingService:
    """Service layer for session booking business logic"""
    
    def __init__(self, repository: BookingRepository):
        self.repository = repository
    
    async def book(
        self,
        student_name: Optional[str],
        email: Optional[str],
        therapist: Optional[str],
        session_type: Optional[str],
        slot_time: Optional[str],
        notes: Optional[str] = None,
    ) -> Tuple[int, str]:
        """
        Book a therapy session.
        
        Steps:
        1. Require name, email, therapist, session type and slot
        2. Generate a join link
        3. Record the booking
        
        Returns:
            Tuple of (booking_id, join_link)
        """
        if not all([student_name, email, therapist, session_type, slot_time]):
            raise ValidationError("Please fill in all required booking fields.")
        
        join_link = generate_join_link(student_name)
        
        booking_id = await self.repository.create(
            student_name=student_name,
            email=email,
            therapist=therapist,
            session_type=session_type,
            slot_time=slot_time,
            notes=notes or "",
            join_link=join_link,
        )
        logger.info(f"Session {booking_id} booked with {therapist} at {slot_time}")
        
        return booking_id, join_link
