"""Mental test Pydantic schemas"""
from typing import Any, Optional
from pydantic import BaseModel


class MentalTestRequest(BaseModel):
    """
    Self-assessment submission.
    
    Answers are left loosely typed so the scorer can report the first
    offending field by name.
    """
    studentName: Optional[str] = None
    email: Optional[str] = None
    answers: Optional[dict[str, Any]] = None


class MentalTestResponse(BaseModel):
    success: bool = True
    averageScore: float
    wellnessState: str
    guidance: str
