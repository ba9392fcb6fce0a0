"""Application settings loaded from the environment."""

from dataclasses import dataclass
from os import getenv
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

ENV_FILE_PATHS = [
    Path(__file__).parent.parent / ".env",
    Path.cwd() / ".env",
]

DEFAULT_DATABASE_URL = "sqlite+aiosqlite:///./feedback.db"


def load_env_file_fallback() -> Optional[Path]:
    """Load the first .env file found. Variables already in the environment win."""
    for env_file in ENV_FILE_PATHS:
        if env_file.is_file():
            load_dotenv(env_file, override=False)
            return env_file
    return None


def _flag(name: str, default: str = "false") -> bool:
    return getenv(name, default).lower() == "true"


@dataclass(frozen=True)
class Settings:
    """Runtime configuration for one application instance."""

    database_url: str = DEFAULT_DATABASE_URL
    debug: bool = False
    admin_username: str = "admin"
    admin_password: str = "admin123"
    strict_tokens: bool = False
    token_ttl: int = 86400

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            database_url=getenv("DATABASE_URL", DEFAULT_DATABASE_URL),
            debug=_flag("APP_DEBUG"),
            admin_username=getenv("ADMIN_USERNAME", "admin"),
            admin_password=getenv("ADMIN_PASSWORD", "admin123"),
            strict_tokens=_flag("ADMIN_STRICT_TOKENS"),
            token_ttl=int(getenv("ADMIN_TOKEN_TTL", "86400")),
        )
