"""Chat relay service layer"""
import asyncio
import logging
from typing import Any, Optional

import requests

from mindful_campus.chat.llm_client import ChatCompletionClient
from mindful_campus.chat.repository import ASSISTANT_ROLE, USER_ROLE, ChatMessageRepository
from mindful_campus.exceptions import ValidationError

logger = logging.getLogger(__name__)

FALLBACK_REPLY = (
    "I hear you. I am here with you right now. Try this with me: inhale for 4, "
    "hold for 4, exhale for 6. If you are in immediate danger or might harm yourself, "
    "please call a 24/7 helpline or emergency services now. "
    "You deserve immediate human support."
)


class ChatService:
    """Relays student messages to the language model and records the transcript"""
    
    def __init__(self, repository: ChatMessageRepository, client: Optional[ChatCompletionClient] = None):
        self.repository = repository
        self.client = client
    
    async def get_reply(self, message: str) -> str:
        """
        Ask the model for a reply, falling back to the safety message.
        
        One attempt only. Without a configured client, or on any failure,
        the fallback text is returned.
        """
        if self.client is None:
            return FALLBACK_REPLY
        
        try:
            return await asyncio.to_thread(self.client.complete, message)
        except (requests.RequestException, ValueError) as e:
            logger.warning(f"Chat API unavailable, using fallback reply: {e}")
            return FALLBACK_REPLY
    
    async def chat(self, message: Any) -> str:
        """
        Handle one chat turn.
        
        Steps:
        1. Record the student's message
        2. Obtain a reply
        3. Record the reply
        """
        if not message or not isinstance(message, str):
            raise ValidationError("Message is required.")
        
        await self.repository.append(USER_ROLE, message)
        reply = await self.get_reply(message)
        await self.repository.append(ASSISTANT_ROLE, reply)
        
        return reply
