"""Secret ORM — one stored version of a secret value.

Invariants:
    - (account, kind, identifier, version) is unique
    - Versions start at 1 and increase by 1 per write; rows are never updated in place
    - The latest value is the row with the highest version

Design Decisions:
    - Append-only rows over an overwrite column: older versions stay readable via ?version=
"""

from datetime import datetime, timezone

from sqlalchemy import (
    String, Text, Integer, DateTime, ForeignKey, UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from devgate.db.base import Base


class Secret(Base):
    """Secret version entity."""
    __tablename__ = "secrets"
    __table_args__ = (
        UniqueConstraint(
            "account", "kind", "identifier", "version",
            name="uq_secrets_resource_version",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    account: Mapped[str] = mapped_column(
        String(100), ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    kind: Mapped[str] = mapped_column(String(50), nullable=False)
    identifier: Mapped[str] = mapped_column(String(500), nullable=False)
    version: Mapped[int] = mapped_column(Integer, nullable=False)
    value: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    account_ref: Mapped["Account"] = relationship(
        "Account", back_populates="secrets",
    )
