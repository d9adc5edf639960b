import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv(override=True)

MIN_SESSION_TOKEN_BYTES = 16


def _env_bool(name: str, default: bool = False) -> bool:
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    return raw_value.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_list(name: str, default: str) -> tuple[str, ...]:
    raw_value = os.getenv(name, default)
    return tuple(item.strip() for item in raw_value.split(",") if item.strip())


def _build_database_url() -> str:
    raw_url = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./database.sqlite")
    if raw_url.startswith("postgresql://"):
        return raw_url.replace("postgresql://", "postgresql+psycopg://", 1)
    if raw_url.startswith("sqlite:///"):
        return raw_url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
    return raw_url


@dataclass(frozen=True)
class Settings:
    database_url: str = _build_database_url()
    database_echo: bool = _env_bool("DATABASE_ECHO", False)
    session_cookie_name: str = os.getenv("SESSION_COOKIE_NAME", "session_id")
    session_cookie_max_age: int = int(os.getenv("SESSION_COOKIE_MAX_AGE", "86400"))
    session_cookie_secure: bool = _env_bool("SESSION_COOKIE_SECURE", False)
    session_token_bytes: int = int(
        os.getenv("SESSION_TOKEN_BYTES", str(MIN_SESSION_TOKEN_BYTES))
    )
    bcrypt_rounds: int = int(os.getenv("BCRYPT_ROUNDS", "10"))
    cors_origins: tuple[str, ...] = _env_list("CORS_ORIGINS", "http://localhost:5173")
    log_level: str = os.getenv("LOG_LEVEL", "INFO").strip().upper()
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3001"))
    reload: bool = _env_bool("RELOAD", False)


settings = Settings()
