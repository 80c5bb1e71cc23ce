# carbath/config.py

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    # ===== SMTP =====
    email_host: str = "smtp.gmail.com"
    email_port: int = 587
    email_user: Optional[str] = None
    email_pass: Optional[str] = None
    email_timeout: float = 20.0
    notify_to: Optional[str] = None

    # ===== HTTP =====
    cors_origin: str = "*"
    app_host: str = "0.0.0.0"
    app_port: int = 8080

    # ===== Booking =====
    enforce_slot_availability: bool = True

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=BASE_DIR / ".env",
        extra="ignore",
    )

    @property
    def notification_recipient(self) -> Optional[str]:
        return self.notify_to or self.email_user


@lru_cache
def get_settings() -> Settings:
    return Settings()
