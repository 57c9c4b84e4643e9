"""Authorization Rules — pure privilege checks against an explicit acting identity.

Invariants:
    - Root may do everything
    - Account management (list/create/destroy/purge) is root-only
    - Secret writes and role creation: root or <account>:user:admin
    - Secret reads: root or any role in the same account
    - Every check raises PermissionDeniedError; none returns a bool to be ignored
"""

from devgate.core.domain_types import Identity
from devgate.core.errors import PermissionDeniedError


def require_root(acting: Identity, operation: str) -> None:
    if not acting.is_root:
        raise PermissionDeniedError(acting.role_id, operation)


def require_admin(acting: Identity, account: str, operation: str) -> None:
    if not (acting.is_root or acting.is_admin_of(account)):
        raise PermissionDeniedError(acting.role_id, operation)


def require_member(acting: Identity, account: str, operation: str) -> None:
    if not (acting.is_root or acting.account == account):
        raise PermissionDeniedError(acting.role_id, operation)
