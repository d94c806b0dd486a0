from mindful_campus.bookings.repository import BookingRepository
from mindful_campus.bookings.service import BookingService
from mindful_campus.db.models import SessionBooking

__all__ = ["BookingRepository", "BookingService", "SessionBooking"]
