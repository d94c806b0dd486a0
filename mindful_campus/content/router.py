from fastapi import APIRouter, Depends
from mindful_campus.content.provider import ContentProvider, get_content_provider
from mindful_campus.content.schemas import ConfigResponse

router = APIRouter(
    prefix="/api",
    tags=["content"],
)


@router.get("/config", response_model=ConfigResponse)
async def get_config(provider: ContentProvider = Depends(get_content_provider)):
    """Daily note, a random quote, the therapist directory and crisis helplines."""
    return provider.get_config()
