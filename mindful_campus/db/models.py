from sqlalchemy import Column, DateTime, Float, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase

from mindful_campus.utils.timezone import utc_now


class Base(DeclarativeBase):
    pass


class SessionBooking(Base):
    """Therapy session booked by a student. Append-only."""
    __tablename__ = "session_bookings"
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    student_name = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    therapist = Column(Text, nullable=False)
    session_type = Column(Text, nullable=False)
    slot_time = Column(Text, nullable=False)
    notes = Column(Text, nullable=True, default="")
    join_link = Column(Text, nullable=False)
    created_at = Column(DateTime, default=utc_now, nullable=False)


class MentalTestResult(Base):
    """Self-assessment submission with its derived score and wellness state"""
    __tablename__ = "mental_test_results"
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    student_name = Column(Text, nullable=False)
    email = Column(Text, nullable=True, default="")
    stress_level = Column(Integer, nullable=False)
    sleep_quality = Column(Integer, nullable=False)
    support_level = Column(Integer, nullable=False)
    mood_stability = Column(Integer, nullable=False)
    focus_level = Column(Integer, nullable=False)
    average_score = Column(Float, nullable=False)
    wellness_state = Column(Text, nullable=False)
    created_at = Column(DateTime, default=utc_now, nullable=False)


class ChatMessage(Base):
    """One line of the chat transcript"""
    __tablename__ = "chatbot_messages"
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    role = Column(String(16), nullable=False)  # user | assistant
    message = Column(Text, nullable=False)
    created_at = Column(DateTime, default=utc_now, nullable=False)
