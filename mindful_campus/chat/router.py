from typing import Optional
from fastapi import APIRouter, Depends
from mindful_campus import config
from mindful_campus.db.gateway import PersistenceGateway, get_gateway
from mindful_campus.chat.llm_client import ChatCompletionClient
from mindful_campus.chat.repository import ChatMessageRepository
from mindful_campus.chat.service import ChatService
from mindful_campus.chat.schemas import ChatRequest, ChatResponse

router = APIRouter(
    prefix="/api",
    tags=["chat"],
)


def get_chat_client() -> ChatCompletionClient | None:
    """Client for the configured API key, or None for fallback-only mode"""
    api_key = config.get_openai_api_key()
    if not api_key:
        return None
    return ChatCompletionClient(
        api_key=api_key,
        model=config.get_openai_model(),
        api_url=config.OPENAI_API_URL,
        timeout=config.OPENAI_TIMEOUT_S,
    )


@router.post("/chat", response_model=ChatResponse)
async def chat(
    request: Optional[ChatRequest] = None,
    gateway: PersistenceGateway = Depends(get_gateway),
    client: ChatCompletionClient | None = Depends(get_chat_client),
):
    """
    Relay a message to the support assistant. API failures are never surfaced.
    
    An empty body is read as {}.
    """
    request = request or ChatRequest()
    service = ChatService(ChatMessageRepository(gateway), client)
    reply = await service.chat(request.message)
    return ChatResponse(reply=reply)
