"""Service configuration loaded from the environment"""
import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

SOURCE_ROOT = Path(__file__).resolve().parent.parent


def resolve_project_root(source_root: Path = SOURCE_ROOT) -> Path:
    """
    Directory holding wellness.db and public/.
    
    MINDFUL_CAMPUS_HOME wins when set. A source checkout ships public/ beside
    the package and uses that; an installed copy would otherwise point into
    site-packages, so it falls back to the working directory.
    """
    home = os.getenv("MINDFUL_CAMPUS_HOME")
    if home:
        return Path(home)
    if (source_root / "public").is_dir():
        return source_root
    return Path.cwd()


PROJECT_ROOT = resolve_project_root()

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))

# Single local database file adjacent to the process
DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite+aiosqlite:///{PROJECT_ROOT / 'wellness.db'}")
DB_ECHO = os.getenv("DB_ECHO", "false").lower() == "true"

PUBLIC_DIR = Path(os.getenv("PUBLIC_DIR", str(PROJECT_ROOT / "public")))
MAX_BODY_BYTES = int(os.getenv("MAX_BODY_BYTES", "1000000"))

JOIN_LINK_BASE_URL = os.getenv("JOIN_LINK_BASE_URL", "https://mindful-campus.local")

OPENAI_API_URL = os.getenv("OPENAI_API_URL", "https://api.openai.com/v1/chat/completions")
OPENAI_TIMEOUT_S = float(os.getenv("OPENAI_TIMEOUT_S", "15"))
DEFAULT_OPENAI_MODEL = "gpt-4o-mini"


def get_openai_api_key() -> str | None:
    """API key for the chat provider; absence switches chat to fallback-only mode"""
    return os.getenv("OPENAI_API_KEY") or None


def get_openai_model() -> str:
    return os.getenv("OPENAI_MODEL") or DEFAULT_OPENAI_MODEL
