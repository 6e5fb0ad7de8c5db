"""SQLAlchemy model for the lists table."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from tasklist.infrastructure.persistence.database import Base


class ListModel(Base):
    """A titled list of tasks owned by one user.

    ``user_id`` is set at creation and never updated. Deleting a user does
    not remove their lists.
    """

    __tablename__ = "lists"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    user_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("users.id"),
        nullable=False,
        index=True,
        comment="Owning user",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    def __repr__(self) -> str:
        return f"<List(id={self.id}, title={self.title}, user_id={self.user_id})>"
