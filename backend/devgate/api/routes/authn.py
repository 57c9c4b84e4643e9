"""Authn Routes — who am I, and API key rotation for the caller."""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from devgate.api.deps import get_identity
from devgate.core.domain_types import Identity
from devgate.infrastructure.database import get_db
from devgate.services.roles import RoleService

router = APIRouter(prefix="/api/v1", tags=["authn"])


@router.get("/whoami")
async def whoami(acting: Identity = Depends(get_identity)):
    return {"account": acting.account, "role_id": acting.role_id}


@router.put("/authn/api_key", response_class=PlainTextResponse)
async def rotate_api_key(
    acting: Identity = Depends(get_identity),
    db: AsyncSession = Depends(get_db),
):
    """Rotate the caller's own API key. The key used for this call stops working."""
    return await RoleService(db).rotate_api_key(acting)
