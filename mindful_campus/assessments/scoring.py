"""Self-assessment scoring and wellness state mapping"""
from enum import Enum
from typing import Any, Mapping, Tuple

from mindful_campus.exceptions import ValidationError


class WellnessState(str, Enum):
    """Wellness categories derived from the average rating"""
    THRIVING = "Thriving and stable"
    DOING_OKAY = "Doing okay with manageable stress"
    NEEDS_GENTLE_SUPPORT = "Needs gentle support and recharge"
    NEEDS_URGENT_SUPPORT = "Needs urgent support and human connection"


# Order matters: the first invalid field is the one reported
ANSWER_FIELDS = ("stressLevel", "sleepQuality", "supportLevel", "moodStability", "focusLevel")

MIN_RATING = 1
MAX_RATING = 5

# Lower bounds, evaluated high to low
STATE_THRESHOLDS = (
    (4.2, WellnessState.THRIVING),
    (3.4, WellnessState.DOING_OKAY),
    (2.6, WellnessState.NEEDS_GENTLE_SUPPORT),
)


def is_valid_rating(value: Any) -> bool:
    # bool is an int subclass; true/false are not ratings
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return MIN_RATING <= value <= MAX_RATING


def wellness_state_for(average: float) -> WellnessState:
    """
    Map an average rating to its wellness state.
    
    Thresholds are closed at the lower bound: 4.2 is Thriving, 4.19 is not.
    """
    for lower_bound, state in STATE_THRESHOLDS:
        if average >= lower_bound:
            return state
    return WellnessState.NEEDS_URGENT_SUPPORT


def score(answers: Mapping[str, Any]) -> Tuple[float, WellnessState]:
    """
    Score the five self-assessment ratings.
    
    Args:
        answers: Mapping holding an integer 1-5 for each of ANSWER_FIELDS
        
    Returns:
        Tuple of (average, wellness_state)
        
    Raises:
        ValidationError: Naming the first field that is missing, not an
            integer, or outside 1-5
    """
    for field in ANSWER_FIELDS:
        if not is_valid_rating(answers.get(field)):
            raise ValidationError(f"Invalid score for {field}")
    
    average = sum(answers[field] for field in ANSWER_FIELDS) / len(ANSWER_FIELDS)
    return average, wellness_state_for(average)
