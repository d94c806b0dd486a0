"""Mental test result repository"""
from typing import List
from sqlalchemy import insert, select
from mindful_campus.db.models import MentalTestResult
from mindful_campus.db.repository import BaseRepository


class MentalTestRepository(BaseRepository):
    """Repository for mental test result database operations"""
    
    async def create(
        self,
        student_name: str,
        email: str,
        ratings: dict,
        average_score: float,
        wellness_state: str,
    ) -> int:
        """Append a result and return its id"""
        stmt = insert(MentalTestResult).values(
            student_name=student_name,
            email=email,
            stress_level=ratings["stressLevel"],
            sleep_quality=ratings["sleepQuality"],
            support_level=ratings["supportLevel"],
            mood_stability=ratings["moodStability"],
            focus_level=ratings["focusLevel"],
            average_score=average_score,
            wellness_state=wellness_state,
        ).returning(MentalTestResult.id)
        return await self.gateway.insert_returning_id(stmt)
    
    async def list_recent(self, limit: int = 10) -> List[dict]:
        """Most recent results, newest first"""
        stmt = select(
            MentalTestResult.id,
            MentalTestResult.student_name,
            MentalTestResult.email,
            MentalTestResult.average_score,
            MentalTestResult.wellness_state,
            MentalTestResult.created_at,
        ).order_by(
            MentalTestResult.created_at.desc(), MentalTestResult.id.desc()
        ).limit(limit)
        return await self.gateway.execute(stmt)
