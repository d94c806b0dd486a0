"""Session booking repository"""
from typing import List
from sqlalchemy import insert, select
from mindful_campus.db.models import SessionBooking
from mindful_campus.db.repository import BaseRepository


class BookingRepository(BaseRepository):
    """Repository for session booking database operations"""
    
    async def create(
        self,
        student_name: str,
        email: str,
        therapist: str,
        session_type: str,
        slot_time: str,
        notes: str,
        join_link: str,
    ) -> int:
        """Append a booking and return the id assigned by the insert"""
        stmt = insert(SessionBooking).values(
            student_name=student_name,
            email=email,
            therapist=therapist,
            session_type=session_type,
            slot_time=slot_time,
            notes=notes,
            join_link=join_link,
        ).returning(SessionBooking.id)
        return await self.gateway.insert_returning_id(stmt)
    
    async def list_recent(self, limit: int = 10) -> List[dict]:
        """Most recent bookings, newest first"""
        stmt = select(
            SessionBooking.id,
            SessionBooking.student_name,
            SessionBooking.email,
            SessionBooking.therapist,
            SessionBooking.session_type,
            SessionBooking.slot_time,
            SessionBooking.join_link,
            SessionBooking.created_at,
        ).order_by(
            SessionBooking.created_at.desc(), SessionBooking.id.desc()
        ).limit(limit)
        return await self.gateway.execute(stmt)
