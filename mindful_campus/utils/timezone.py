"""UTC clock helpers"""
from datetime import datetime
import pytz

SECONDS_PER_DAY = 86400


def utc_now() -> datetime:
    """Current time as a naive UTC datetime, the form stored in the database"""
    return datetime.now(pytz.utc).replace(tzinfo=None)


def unix_day(moment: datetime | None = None) -> int:
    """
    Whole days elapsed since the Unix epoch.
    
    Args:
        moment: Aware datetime, or naive datetime assumed to be in UTC.
            Defaults to now.
        
    Returns:
        Day number; changes exactly at UTC midnight
    """
    if moment is None:
        moment = datetime.now(pytz.utc)
    elif moment.tzinfo is None:
        moment = pytz.utc.localize(moment)
    return int(moment.timestamp()) // SECONDS_PER_DAY
