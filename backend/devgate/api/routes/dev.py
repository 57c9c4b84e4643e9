"""Dev Route — GET /dev, the unauthenticated diagnostic gateway.

Invariants:
    - Exactly one route, exact path /dev, GET only, hidden from the OpenAPI schema
    - No business logic here: query params go straight to DevDispatch
    - In "soft" error mode CallerErrors render as 200 {"error": msg}; every other
      error (and every error in "raise" mode) propagates to the global handlers

Design Decisions:
    - The path has no format suffix variant: /dev.json is a plain 404
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from devgate.core.errors import CallerError
from devgate.infrastructure.database import get_db
from devgate.services.dev_dispatch import DevDispatch

logger = logging.getLogger(__name__)

DEV_PATH = "/dev"
DEV_PATH_PATTERN = r"^/dev"

router = APIRouter(tags=["dev"])


@router.get(DEV_PATH, include_in_schema=False)
async def dev_index(request: Request, db: AsyncSession = Depends(get_db)):
    """Dispatch ?action=<tag> to its handler."""
    try:
        return await DevDispatch(db).execute(request.query_params)
    except CallerError as exc:
        if request.app.state.settings.dev_error_mode != "soft":
            raise
        logger.warning(
            f"Dev request rejected: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(exc.to_soft_response())
