"""Chat transcript repository"""
from sqlalchemy import insert
from mindful_campus.db.models import ChatMessage
from mindful_campus.db.repository import BaseRepository

USER_ROLE = "user"
ASSISTANT_ROLE = "assistant"


class ChatMessageRepository(BaseRepository):
    """Append-only access to the chat transcript"""
    
    async def append(self, role: str, message: str) -> int:
        stmt = insert(ChatMessage).values(role=role, message=message).returning(ChatMessage.id)
        return await self.gateway.insert_returning_id(stmt)
