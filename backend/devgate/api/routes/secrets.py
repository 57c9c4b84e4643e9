"""Secret Routes — authenticated read/write of versioned secret values.

Invariants:
    - The authenticated role is the acting identity (no impersonation here)
    - POST body is the raw secret value, stored byte-for-byte as UTF-8 text
    - GET returns text/plain, never JSON-wrapped
"""

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from devgate.api.deps import get_identity
from devgate.core.dev_request import MAX_VERSION
from devgate.core.domain_types import Identity, ResourceId
from devgate.core.errors import CallerError, MissingParameterError
from devgate.infrastructure.database import get_db
from devgate.services.secrets import SecretService

router = APIRouter(prefix="/api/v1/secrets", tags=["secrets"])


@router.get("/{account}/{kind}/{identifier:path}", response_class=PlainTextResponse)
async def show_secret(
    account: str,
    kind: str,
    identifier: str,
    version: int | None = Query(None, ge=1, le=MAX_VERSION),
    acting: Identity = Depends(get_identity),
    db: AsyncSession = Depends(get_db),
):
    resource = ResourceId(account, kind, identifier)
    return await SecretService(db).show(acting, resource, version)


@router.post("/{account}/{kind}/{identifier:path}", status_code=status.HTTP_201_CREATED)
async def create_secret(
    account: str,
    kind: str,
    identifier: str,
    request: Request,
    acting: Identity = Depends(get_identity),
    db: AsyncSession = Depends(get_db),
):
    try:
        value = (await request.body()).decode("utf-8")
    except UnicodeDecodeError:
        raise CallerError("value must be UTF-8 text", "INVALID_VALUE") from None
    if not value:
        raise MissingParameterError("value")
    resource = ResourceId(account, kind, identifier)
    version = await SecretService(db).create(acting, resource, value)
    return {"id": str(resource), "version": version}
