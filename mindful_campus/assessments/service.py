"""Mental test service layer"""
import logging
from typing import Any, Mapping, Optional
from mindful_campus.assessments.repository import MentalTestRepository
from mindful_campus.assessments.scoring import WellnessState, score
from mindful_campus.exceptions import ValidationError

logger = logging.getLogger(__name__)

GUIDANCE = (
    "Thank you for checking in. Your feelings are valid. "
    "Consider connecting with a therapist today for personalized support."
)


class AssessmentService:
    """Service layer for self-assessment submissions"""
    
    def __init__(self, repository: MentalTestRepository):
        self.repository = repository
    
    async def submit(
        self,
        student_name: Optional[str],
        email: Optional[str],
        answers: Optional[Mapping[str, Any]],
    ) -> tuple[float, WellnessState]:
        """
        Score a submission and record it.
        
        The result row is written before the score is returned, so a
        storage failure means no result reaches the caller.
        """
        if not student_name or answers is None:
            raise ValidationError("Name and answers are required.")
        
        average, state = score(answers)
        
        result_id = await self.repository.create(
            student_name=student_name,
            email=email or "",
            ratings=dict(answers),
            average_score=average,
            wellness_state=state.value,
        )
        logger.info(f"Mental test {result_id} recorded: {average:.2f} ({state.value})")
        
        return average, state
