from datetime import UTC, datetime, tzinfo
from zoneinfo import ZoneInfo

from pydantic_settings import BaseSettings


def utcnow() -> datetime:
    """Return the current UTC time as a naive datetime.

    Replaces the deprecated ``datetime.utcnow()`` while keeping datetimes
    naive so they stay compatible with SQLite (which doesn't store tz info).
    """
    return datetime.now(UTC).replace(tzinfo=None)


class Settings(BaseSettings):
    app_name: str = "Vocab Deck"
    database_url: str = "sqlite+aiosqlite:///./vocab_deck.db"
    timezone: str = "UTC"  # IANA name used for "today" and day arithmetic
    default_owner: str = "local"
    debug: bool = False

    model_config = {"env_prefix": "VOCAB_DECK_", "env_file": ".env"}

    @property
    def tz(self) -> tzinfo:
        return ZoneInfo(self.timezone)


settings = Settings()
