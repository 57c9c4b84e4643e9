"""Route Dependencies — acting identity for authenticated routes."""

from fastapi import Request

from devgate.core.domain_types import Identity
from devgate.core.errors import AuthenticationError


def get_identity(request: Request) -> Identity:
    """Identity attached by AuthenticationMiddleware.

    Absent only on bypassed paths, where an authenticated route has no business running.
    """
    identity = getattr(request.state, "identity", None)
    if identity is None:
        raise AuthenticationError()
    return identity
