"""Environment configuration.

Values are read from the process environment on each call so tests can
patch `os.environ`. A `.env` file next to the project is loaded once on
import when present.
"""
import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_ASSISTANT_TIMEOUT = 30.0


def get_supabase_credentials() -> tuple[str, str]:
    """Return (url, service role key) or raise if either is missing."""
    url = os.environ.get("SUPABASE_URL")
    key = os.environ.get("SUPABASE_SERVICE_ROLE_KEY")
    if not url or not key:
        raise ValueError("SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set")
    return url, key


def get_assistant_url() -> str:
    """Streaming chat completion endpoint used by the assistant."""
    url = os.environ.get("AI_ASSISTANT_URL")
    if url:
        return url
    supabase_url = os.environ.get("SUPABASE_URL", "").rstrip("/")
    if not supabase_url:
        raise ValueError("AI_ASSISTANT_URL or SUPABASE_URL must be set")
    # The assistant is deployed as an edge function next to the database
    return f"{supabase_url}/functions/v1/ai-assistant"


def get_assistant_key() -> str:
    return os.environ.get("AI_ASSISTANT_KEY") or os.environ.get("SUPABASE_ANON_KEY", "")


def get_assistant_timeout() -> float:
    raw = os.environ.get("AI_ASSISTANT_TIMEOUT")
    if not raw:
        return DEFAULT_ASSISTANT_TIMEOUT
    try:
        return float(raw)
    except ValueError:
        return DEFAULT_ASSISTANT_TIMEOUT


def get_cors_origins() -> list[str]:
    raw = os.environ.get("CORS_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]
