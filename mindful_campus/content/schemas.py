"""Content Pydantic schemas"""
from typing import List
from pydantic import BaseModel


class Therapist(BaseModel):
    name: str
    specialization: str
    availability: str


class Helpline(BaseModel):
    country: str
    number: str


class ConfigResponse(BaseModel):
    """Landing page content bundle"""
    dailyNote: str
    quote: str
    therapists: List[Therapist]
    helplines: List[Helpline]
