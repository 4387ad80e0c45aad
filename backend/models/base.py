from datetime import datetime

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from backend.config import utcnow


class Base(DeclarativeBase):
    pass


class TimestampMixin:
    """Immutable creation time, stored as naive UTC."""

    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utcnow)
