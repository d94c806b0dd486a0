"""Chat Pydantic schemas"""
from typing import Any
from pydantic import BaseModel


class ChatRequest(BaseModel):
    # Type is checked by the service so a non-text message gets the usual error
    message: Any = None


class ChatResponse(BaseModel):
    reply: str
