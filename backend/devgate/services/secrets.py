"""Secret Service — versioned secret reads and writes.

Invariants:
    - Reads: root or any role in the secret's account; writes: root or <account>:user:admin
    - Writes append version max+1 (first write is 1); nothing is overwritten in place
    - show() without a version returns the highest version
    - Secret values never appear in log records
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from devgate.core.authorization import require_admin, require_member
from devgate.core.domain_types import Identity, ResourceId
from devgate.core.errors import ResourceNotFoundError
from devgate.models.account import Account
from devgate.models.secret import Secret

logger = logging.getLogger(__name__)


class SecretService:
    """Secrets table access."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def show(
        self, acting: Identity, resource: ResourceId, version: int | None = None,
    ) -> str:
        require_member(acting, resource.account, "read secrets")
        await self._require_account(resource.account)

        query = select(Secret.value).where(*self._match(resource))
        if version is not None:
            query = query.where(Secret.version == version)
        else:
            query = query.order_by(Secret.version.desc()).limit(1)
        value = (await self.db.execute(query)).scalar_one_or_none()
        if value is None:
            label = str(resource) if version is None else f"{resource}@{version}"
            raise ResourceNotFoundError("Secret", label)
        return value

    async def create(
        self, acting: Identity, resource: ResourceId, value: str,
    ) -> int:
        """Store a new version of the secret. Returns the version number."""
        require_admin(acting, resource.account, "write secrets")
        await self._require_account(resource.account)

        current = (await self.db.execute(
            select(func.max(Secret.version)).where(*self._match(resource)),
        )).scalar_one_or_none()
        version = (current or 0) + 1
        self.db.add(Secret(
            account=resource.account, kind=resource.kind,
            identifier=resource.identifier, version=version, value=value,
        ))
        await self.db.commit()
        logger.info(
            f"Secret {resource} stored as version {version}",
            extra={"role_id": acting.role_id, "account": resource.account},
        )
        return version

    async def _require_account(self, account: str) -> None:
        if await self.db.get(Account, account) is None:
            raise ResourceNotFoundError("Account", account)

    @staticmethod
    def _match(resource: ResourceId) -> tuple:
        return (
            Secret.account == resource.account,
            Secret.kind == resource.kind,
            Secret.identifier == resource.identifier,
        )
