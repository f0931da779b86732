from pydantic import BaseModel
from dotenv import load_dotenv
import os

load_dotenv()


def _env_list(name: str, default: str) -> list[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings(BaseModel):
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./todo_scheduler.db")
    jwt_secret: str = os.getenv("JWT_SECRET", "change-me")
    # 30 days
    jwt_expire_minutes: int = int(os.getenv("JWT_EXPIRE_MINUTES", "43200"))

    cookie_name: str = os.getenv("COOKIE_NAME", "jwt")
    cookie_secure: bool = _env_bool("COOKIE_SECURE")

    cors_origins: list[str] = _env_list(
        "CORS_ORIGINS", "http://localhost:5173,http://127.0.0.1:5173"
    )
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    email_host: str = os.getenv("EMAIL_HOST", "smtp.gmail.com")
    email_port: int = int(os.getenv("EMAIL_PORT", "587"))
    email_user: str = os.getenv("EMAIL_USER", "")
    email_pass: str = os.getenv("EMAIL_PASS", "")
    email_from_name: str = os.getenv("EMAIL_FROM_NAME", "ToDo Scheduler")


settings = Settings()
