import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# This points to the repository root (one level above the package)
BASE_DIR = Path(__file__).resolve().parent.parent

# PROJECT_ROOT for easy reference throughout the app
PROJECT_ROOT = Path(os.getenv("PROJECT_ROOT", str(BASE_DIR)))

# Uploaded files are staged here before they are pushed to storage
TEMP_DIR = PROJECT_ROOT / "tmp"
TEMP_DIR.mkdir(parents=True, exist_ok=True)

load_dotenv(PROJECT_ROOT / ".env")

DEFAULT_BUCKET = "videotube-media"
DEFAULT_CORS_ORIGINS = "http://localhost:3000,http://127.0.0.1:3000"


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _first_env(*names: str) -> Optional[str]:
    for name in names:
        value = os.getenv(name)
        if value:
            return value
    return None


@dataclass(frozen=True)
class Settings:
    supabase_url: Optional[str]
    supabase_key: Optional[str]
    videos_table: str = "videos"
    credentials_path: str = "key.json"
    media_bucket: str = DEFAULT_BUCKET
    publish_by_default: bool = True
    cors_origins: tuple = ()
    log_level: str = "INFO"
    log_file: Optional[str] = None
    ffprobe_binary: str = "ffprobe"
    port: int = 8000

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Reads settings from the process environment (.env already loaded).
        Supabase keys fall back to the names common in Supabase/Next.js setups.
        """
        credentials_path = os.getenv("GOOGLE_APPLICATION_CREDENTIALS", "key.json")
        if not os.path.isabs(credentials_path):
            credentials_path = str(PROJECT_ROOT / credentials_path)

        origins = os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)

        return cls(
            supabase_url=_first_env("SUPABASE_URL", "NEXT_PUBLIC_SUPABASE_URL"),
            supabase_key=_first_env(
                "SUPABASE_SERVICE_KEY",
                "SUPABASE_ANON_KEY",
                "NEXT_PUBLIC_SUPABASE_ANON_KEY",
            ),
            videos_table=os.getenv("VIDEOS_TABLE", "videos"),
            credentials_path=credentials_path,
            media_bucket=os.getenv("MEDIA_BUCKET", DEFAULT_BUCKET),
            publish_by_default=_env_flag("VIDEO_PUBLISH_BY_DEFAULT", True),
            cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            log_file=os.getenv("LOG_FILE") or None,
            ffprobe_binary=os.getenv("FFPROBE_BINARY", "ffprobe"),
            port=int(os.getenv("PORT", "8000")),
        )


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()
