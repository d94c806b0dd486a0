from typing import Dict, List
from mindful_campus.assessments.repository import MentalTestRepository
from mindful_campus.bookings.repository import BookingRepository

HISTORY_LIMIT = 10


class HistoryService:
    """Reads recent activity across bookings and self-assessments"""

    def __init__(self, booking_repository: BookingRepository, test_repository: MentalTestRepository):
        self.booking_repository = booking_repository
        self.test_repository = test_repository

    async def get_recent(self, limit: int = HISTORY_LIMIT) -> Dict[str, List[dict]]:
        return {
            "bookings": await self.booking_repository.list_recent(limit),
            "tests": await self.test_repository.list_recent(limit),
        }
