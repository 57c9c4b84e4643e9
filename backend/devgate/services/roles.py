"""Role Service — role lookup, creation, API-key authentication and rotation.

Invariants:
    - find_by_id takes no acting identity (direct lookup); a miss is ResourceNotFoundError
    - Role ids are fully qualified account:kind:identifier; anything else is a CallerError
    - authenticate never distinguishes "unknown key" from "no key" in its message
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from devgate.core.authorization import require_admin
from devgate.core.credentials import generate_api_key
from devgate.core.domain_types import Identity, ResourceId
from devgate.core.errors import (
    AuthenticationError, CallerError, ConflictError, MalformedResourceIdError,
    ResourceNotFoundError,
)
from devgate.models.account import Account
from devgate.models.role import Role

logger = logging.getLogger(__name__)


def _parse_role_id(role_id: str) -> ResourceId:
    try:
        return ResourceId.parse(role_id)
    except MalformedResourceIdError:
        raise CallerError("malformed role_id", "MALFORMED_ROLE_ID") from None


class RoleService:
    """Roles table access."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_id(self, role_id: str) -> Role:
        _parse_role_id(role_id)
        role = await self.db.get(Role, role_id)
        if role is None:
            raise ResourceNotFoundError("Role", role_id)
        return role

    async def create_role(self, acting: Identity, role_id: str) -> Role:
        parsed = _parse_role_id(role_id)
        require_admin(acting, parsed.account, "create roles")
        if await self.db.get(Account, parsed.account) is None:
            raise ResourceNotFoundError("Account", parsed.account)
        if await self.db.get(Role, role_id) is not None:
            raise ConflictError("Role", role_id)

        role = Role(
            role_id=role_id, account=parsed.account, kind=parsed.kind,
            identifier=parsed.identifier, api_key=generate_api_key(),
        )
        self.db.add(role)
        await self.db.commit()
        logger.info(
            f"Role {role_id} created",
            extra={"role_id": acting.role_id, "account": parsed.account},
        )
        return role

    async def authenticate(self, api_key: str) -> Role:
        result = await self.db.execute(select(Role).where(Role.api_key == api_key))
        role = result.scalar_one_or_none()
        if role is None:
            raise AuthenticationError("Invalid API key")
        return role

    async def rotate_api_key(self, acting: Identity) -> str:
        """Replace the acting role's API key. The old key stops working at commit."""
        role = await self.db.get(Role, acting.role_id)
        if role is None:
            raise ResourceNotFoundError("Role", acting.role_id)
        role.api_key = generate_api_key()
        await self.db.commit()
        logger.info("API key rotated", extra={"role_id": acting.role_id})
        return role.api_key
