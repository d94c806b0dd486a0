"""Daily notes, quotes and directories"""
import random
from datetime import datetime
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Optional

import yaml

from mindful_campus.utils.timezone import unix_day

CONTENT_FILE = Path(__file__).parent / "content.yml"


class ContentProvider:
    """Serves fixed and rotating content loaded from content.yml"""
    
    def __init__(self, content_file_path: Path = CONTENT_FILE):
        content = self._load_content(content_file_path)
        self.daily_notes: List[str] = content["daily_notes"]
        self.quotes: List[str] = content["quotes"]
        self.therapists: List[Dict[str, str]] = content["therapists"]
        self.helplines: List[Dict[str, str]] = content["helplines"]
    
    def _load_content(self, file_path: Path) -> Dict:
        """Load content lists from YAML file"""
        with open(file_path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f)
    
    def get_daily_note(self, now: Optional[datetime] = None) -> str:
        """Note for the current UTC day; every caller sees the same one until midnight UTC"""
        return self.daily_notes[unix_day(now) % len(self.daily_notes)]
    
    def random_quote(self) -> str:
        return random.choice(self.quotes)
    
    def list_therapists(self) -> List[Dict[str, str]]:
        return [dict(t) for t in self.therapists]
    
    def list_helplines(self) -> List[Dict[str, str]]:
        return [dict(h) for h in self.helplines]
    
    def get_config(self, now: Optional[datetime] = None) -> Dict:
        """Content bundle for the landing page"""
        return {
            "dailyNote": self.get_daily_note(now),
            "quote": self.random_quote(),
            "therapists": self.list_therapists(),
            "helplines": self.list_helplines(),
        }


@lru_cache
def get_content_provider() -> ContentProvider:
    """Dependency returning the shared read-only content provider"""
    return ContentProvider()
