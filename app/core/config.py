import os
from pathlib import Path
from typing import Optional

DEFAULT_DATASET_PATH = Path(__file__).resolve().parents[1] / "data" / "dataset.xml"

def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default

def dataset_path() -> Path:
    raw = os.getenv("SEARCH_DATASET_PATH", "").strip()
    return Path(raw) if raw else DEFAULT_DATASET_PATH

def access_token() -> Optional[str]:
    # unset or empty disables the token check
    return os.getenv("SEARCH_ACCESS_TOKEN") or None

def log_level() -> str:
    return os.getenv("SEARCH_LOG_LEVEL", "INFO").upper()

def server_host() -> str:
    return os.getenv("SEARCH_HOST", "127.0.0.1")

def server_port() -> int:
    return _env_int("SEARCH_PORT", 8080)
