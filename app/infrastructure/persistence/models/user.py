"""User ORM model. Email/password accounts with a role (user or admin)."""

from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from app.domain.enums import UserRole
from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import (
    IntegerIdMixin,
    SoftDeleteMixin,
    TimestampMixin,
)


class User(IntegerIdMixin, TimestampMixin, SoftDeleteMixin, Base):
    """User entity. Table: users. Email is unique; username is optional."""

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(String, nullable=False, unique=True, index=True)
    hashed_password: Mapped[str | None] = mapped_column(String, nullable=True)
    display_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    username: Mapped[str | None] = mapped_column(String(50), nullable=True, index=True)
    avatar_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    role: Mapped[str] = mapped_column(
        String, nullable=False, default=UserRole.USER.value, server_default=UserRole.USER.value
    )
    last_seen_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
