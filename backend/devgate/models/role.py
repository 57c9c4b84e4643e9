"""Role ORM — an authenticatable identity with an API key.

Invariants:
    - role_id is the fully qualified account:kind:identifier string (primary key)
    - account/kind/identifier denormalized from role_id for scoped queries
    - api_key is unique across all roles (it is the login credential)
"""

from datetime import datetime, timezone

from sqlalchemy import String, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from devgate.db.base import Base


class Role(Base):
    """Role entity — user, host or other kind within an account."""
    __tablename__ = "roles"

    role_id: Mapped[str] = mapped_column(String(500), primary_key=True)
    account: Mapped[str] = mapped_column(
        String(100), ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    kind: Mapped[str] = mapped_column(String(50), nullable=False)
    identifier: Mapped[str] = mapped_column(String(300), nullable=False)
    api_key: Mapped[str] = mapped_column(
        String(100), nullable=False, unique=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    account_ref: Mapped["Account"] = relationship(
        "Account", back_populates="roles",
    )
