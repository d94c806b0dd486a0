from typing import Optional
from fastapi import APIRouter, Depends, status
from mindful_campus.db.gateway import PersistenceGateway, get_gateway
from mindful_campus.assessments.repository import MentalTestRepository
from mindful_campus.assessments.service import AssessmentService, GUIDANCE
from mindful_campus.assessments.schemas import MentalTestRequest, MentalTestResponse

router = APIRouter(
    prefix="/api",
    tags=["mental-test"],
)


@router.post("/mental-test", response_model=MentalTestResponse, status_code=status.HTTP_200_OK)
async def submit_mental_test(
    request: Optional[MentalTestRequest] = None,
    gateway: PersistenceGateway = Depends(get_gateway),
):
    """
    Score a five-question self-assessment.
    
    Each answer is an integer 1-5. The average maps to one of four
    wellness states; the result is stored before it is returned.
    """
    request = request or MentalTestRequest()
    service = AssessmentService(MentalTestRepository(gateway))
    
    average, state = await service.submit(
        student_name=request.studentName,
        email=request.email,
        answers=request.answers,
    )
    
    return MentalTestResponse(
        averageScore=round(average, 2),
        wellnessState=state.value,
        guidance=GUIDANCE,
    )
