"""SQLAlchemy model for user sessions.

Each row pairs a refresh token with its absolute expiry. Rows are only ever
appended; validity is decided by comparing ``expires_at`` with the clock.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tasklist.infrastructure.persistence.database import Base


class UserSessionModel(Base):
    """Refresh-token session belonging to a user."""

    __tablename__ = "user_sessions"

    # Autoincrement key doubles as the creation order of a user's sessions
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    user_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    token: Mapped[str] = mapped_column(
        String(128),
        nullable=False,
        unique=True,
        index=True,
    )
    expires_at: Mapped[float] = mapped_column(
        Float,
        nullable=False,
        comment="Absolute expiry in seconds since the epoch",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    user = relationship("UserModel", back_populates="sessions")

    def __repr__(self) -> str:
        return f"UserSessionModel(id={self.id!r}, user_id={self.user_id!r}, expires_at={self.expires_at!r})"
