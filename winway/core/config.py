# winway/core/config.py
from functools import lru_cache
from zoneinfo import ZoneInfo

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Storage keys, one JSON blob per key.
SERVICE_REQUESTS_KEY = "@winway_service_requests"
DESK_TICKETS_KEY = "@winway_desk_tickets"
USER_PROFILE_KEY = "@winway_user_profile"

MYNIGHT_KEYS = {
    "mood": "@winway_mynight_mood",
    "table": "@winway_mynight_table",
    "plan": "@winway_mynight_plan",
    "reminders": "@winway_mynight_reminders",
}


class Settings(BaseSettings):
    DATABASE_URL: str = Field(default="sqlite:///./winway.db")
    APP_NAME: str = "WinWay Lounge API"
    APP_DESC: str = "Digital concierge: dress codes, staff calls, service desk and entertainment"
    APP_VERSION: str = "1.0.0"
    LOG_LEVEL: str = "INFO"

    # calendar days for history filters and "today" are taken in this zone
    TIMEZONE: str = "UTC"

    # comma separated, empty means allow all
    CORS_ORIGINS: str | None = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def tz(self) -> ZoneInfo:
        return ZoneInfo(self.TIMEZONE)

    @property
    def cors_origins(self) -> list[str]:
        if not self.CORS_ORIGINS:
            return ["*"]
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()


__all__ = [
    "Settings",
    "get_settings",
    "SERVICE_REQUESTS_KEY",
    "DESK_TICKETS_KEY",
    "USER_PROFILE_KEY",
    "MYNIGHT_KEYS",
]
