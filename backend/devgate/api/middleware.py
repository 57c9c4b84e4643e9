"""Authentication Middleware — API-key authentication with an explicit bypass list.

Invariants:
    - Every request not matching a bypass pattern must carry "Authorization: Token <api_key>"
    - A matching request passes through untouched: no identity is attached to request.state
    - AuthenticatorConfig lives on app.state.authenticator_config; register_exemption
      refuses to run (StartupError) when it is absent
    - bypass_patterns only grows, and only during app composition; the same pattern
      source is never added twice

Design Decisions:
    - Typed config object shared by reference with the middleware instance: exemptions
      registered after add_middleware() but before the first request are still seen
    - Errors rendered here directly: app exception handlers sit inside user middleware
"""

import logging
import re
from dataclasses import dataclass, field

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from devgate.core.domain_types import Identity
from devgate.core.errors import AuthenticationError, DevgateError, StartupError
from devgate.infrastructure.database import get_db_manager
from devgate.services.roles import RoleService

logger = logging.getLogger(__name__)

_TOKEN_SCHEME = "token"


@dataclass
class AuthenticatorConfig:
    """Authentication settings — the bypass list is the only mutable part."""
    bypass_patterns: list[re.Pattern] = field(default_factory=list)

    @classmethod
    def from_patterns(cls, patterns: list[str]) -> "AuthenticatorConfig":
        config = cls()
        for pattern in patterns:
            config.exempt(pattern)
        return config

    def exempt(self, pattern: str) -> bool:
        """Add pattern to the bypass list. False if already present."""
        if any(p.pattern == pattern for p in self.bypass_patterns):
            return False
        self.bypass_patterns.append(re.compile(pattern))
        return True

    def is_exempt(self, path: str) -> bool:
        return any(p.search(path) for p in self.bypass_patterns)


def install_authentication(app: FastAPI, config: AuthenticatorConfig) -> None:
    app.state.authenticator_config = config
    app.add_middleware(AuthenticationMiddleware, config=config)


def register_exemption(app: FastAPI, pattern: str) -> None:
    """Let requests matching pattern skip authentication. Startup-only."""
    config = getattr(app.state, "authenticator_config", None)
    if not isinstance(config, AuthenticatorConfig):
        raise StartupError(
            f"Authentication middleware not installed; cannot exempt '{pattern}'",
        )
    if config.exempt(pattern):
        logger.info(f"Authentication bypass registered for {pattern}")


def _extract_api_key(header: str | None) -> str | None:
    if not header:
        return None
    scheme, _, credential = header.partition(" ")
    if scheme.lower() != _TOKEN_SCHEME or not credential.strip():
        return None
    return credential.strip()


class AuthenticationMiddleware(BaseHTTPMiddleware):
    """Resolve the caller's role from its API key, or reject with 401."""

    def __init__(self, app, config: AuthenticatorConfig):
        super().__init__(app)
        self.config = config

    async def dispatch(self, request: Request, call_next):
        if self.config.is_exempt(request.url.path):
            return await call_next(request)

        try:
            request.state.identity = await self._authenticate(request)
        except DevgateError as exc:
            logger.warning(
                f"Authentication failed on {request.url.path}: {exc.message}",
                extra={"error_code": exc.code, "path": request.url.path},
            )
            return JSONResponse(
                status_code=exc.http_status, content=exc.to_response(),
            )
        return await call_next(request)

    async def _authenticate(self, request: Request) -> Identity:
        api_key = _extract_api_key(request.headers.get("authorization"))
        if api_key is None:
            raise AuthenticationError()
        async with get_db_manager().session() as db:
            role = await RoleService(db).authenticate(api_key)
        return Identity(role.role_id)
