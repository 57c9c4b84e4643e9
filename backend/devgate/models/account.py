"""Account ORM — top-level tenant that owns roles and secrets.

Invariants:
    - id is the account name (string primary key, caller-chosen)
    - Deleting an account cascades to its roles and secrets
"""

from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship

from devgate.db.base import Base


class Account(Base):
    """Account aggregate root."""
    __tablename__ = "accounts"

    id: Mapped[str] = mapped_column(String(100), primary_key=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    roles: Mapped[list["Role"]] = relationship(
        "Role", back_populates="account_ref",
        cascade="all, delete-orphan", passive_deletes=True,
    )
    secrets: Mapped[list["Secret"]] = relationship(
        "Secret", back_populates="account_ref",
        cascade="all, delete-orphan", passive_deletes=True,
    )
