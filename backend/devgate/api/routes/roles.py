"""Role Routes — role creation by an account admin."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from devgate.api.deps import get_identity
from devgate.core.domain_types import Identity
from devgate.infrastructure.database import get_db
from devgate.services.roles import RoleService

router = APIRouter(prefix="/api/v1/roles", tags=["roles"])


@router.post("/{account}/{kind}/{identifier:path}", status_code=status.HTTP_201_CREATED)
async def create_role(
    account: str,
    kind: str,
    identifier: str,
    acting: Identity = Depends(get_identity),
    db: AsyncSession = Depends(get_db),
):
    """Create a role and return its initial API key."""
    role = await RoleService(db).create_role(acting, f"{account}:{kind}:{identifier}")
    return {"id": role.role_id, "api_key": role.api_key}
