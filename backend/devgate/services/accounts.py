"""Account Service — list/create/destroy accounts and purge the store.

Invariants:
    - Every operation requires a root acting identity (checked before any query)
    - create_account provisions <account>:user:admin with a fresh API key in the same commit
    - destroy_account and purge delete child rows explicitly (SQLite does not enforce FK cascades)
    - list_accounts order is stable: created_at, then id
"""

import logging
import re

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from devgate.core.authorization import require_root
from devgate.core.credentials import generate_api_key
from devgate.core.domain_types import ADMIN_LOGIN, Identity
from devgate.core.errors import CallerError, ConflictError, ResourceNotFoundError
from devgate.models.account import Account
from devgate.models.role import Role
from devgate.models.secret import Secret

logger = logging.getLogger(__name__)

_ACCOUNT_ID = re.compile(r"^[A-Za-z0-9_.-]+$")


class AccountService:
    """Account collection backed by the accounts table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_accounts(self, acting: Identity) -> list[str]:
        require_root(acting, "list accounts")
        result = await self.db.execute(
            select(Account.id).order_by(Account.created_at, Account.id),
        )
        return list(result.scalars().all())

    async def create_account(self, acting: Identity, account_id: str) -> dict:
        """Create account plus its admin role. Returns the admin API key."""
        require_root(acting, "create accounts")
        if not _ACCOUNT_ID.match(account_id):
            raise CallerError(
                f"invalid account id '{account_id}'", "INVALID_ACCOUNT_ID",
            )
        if await self.db.get(Account, account_id) is not None:
            raise ConflictError("Account", account_id)

        api_key = generate_api_key()
        self.db.add(Account(id=account_id))
        self.db.add(Role(
            role_id=f"{account_id}:user:{ADMIN_LOGIN}",
            account=account_id, kind="user", identifier=ADMIN_LOGIN,
            api_key=api_key,
        ))
        await self.db.commit()
        logger.info(
            f"Account {account_id} created", extra={"account": account_id},
        )
        return {"id": account_id, "api_key": api_key}

    async def destroy_account(self, acting: Identity, account_id: str) -> None:
        require_root(acting, "destroy accounts")
        if await self.db.get(Account, account_id) is None:
            raise ResourceNotFoundError("Account", account_id)
        await self.db.execute(delete(Secret).where(Secret.account == account_id))
        await self.db.execute(delete(Role).where(Role.account == account_id))
        await self.db.execute(delete(Account).where(Account.id == account_id))
        await self.db.commit()
        logger.info(
            f"Account {account_id} destroyed", extra={"account": account_id},
        )

    async def purge(self, acting: Identity) -> dict[str, int]:
        """Delete every secret, role and account. Returns deleted row counts."""
        require_root(acting, "purge the store")
        secrets = await self.db.execute(delete(Secret))
        roles = await self.db.execute(delete(Role))
        accounts = await self.db.execute(delete(Account))
        await self.db.commit()
        counts = {
            "accounts": accounts.rowcount,
            "roles": roles.rowcount,
            "secrets": secrets.rowcount,
        }
        logger.warning(f"Store purged: {counts}")
        return counts
