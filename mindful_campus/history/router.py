from fastapi import APIRouter, Depends
from mindful_campus.db.gateway import PersistenceGateway, get_gateway
from mindful_campus.assessments.repository import MentalTestRepository
from mindful_campus.bookings.repository import BookingRepository
from mindful_campus.history.service import HistoryService
from mindful_campus.history.schemas import HistoryResponse

router = APIRouter(
    prefix="/api",
    tags=["history"],
)


@router.get("/history", response_model=HistoryResponse)
async def get_history(gateway: PersistenceGateway = Depends(get_gateway)):
    """The 10 most recent bookings and 10 most recent test results."""
    service = HistoryService(BookingRepository(gateway), MentalTestRepository(gateway))
    return await service.get_recent()
