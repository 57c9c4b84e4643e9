"""Authorization Rules — root, account admin and account member checks."""

import pytest

from devgate.core.authorization import require_admin, require_member, require_root
from devgate.core.domain_types import Identity
from devgate.core.errors import PermissionDeniedError

ALICE = Identity("cucumber:user:alice")


def test_root_passes_everything():
    root = Identity.root()
    require_root(root, "x")
    require_admin(root, "cucumber", "x")
    require_member(root, "cucumber", "x")


def test_account_admin_is_not_root():
    with pytest.raises(PermissionDeniedError) as exc:
        require_root(Identity.account_admin("cucumber"), "list accounts")
    assert exc.value.http_status == 403
    assert "list accounts" in exc.value.message


def test_admin_only_in_own_account():
    require_admin(Identity.account_admin("cucumber"), "cucumber", "x")
    with pytest.raises(PermissionDeniedError):
        require_admin(Identity.account_admin("cucumber"), "other", "x")


def test_member_can_read_but_not_write():
    require_member(ALICE, "cucumber", "read secrets")
    with pytest.raises(PermissionDeniedError):
        require_admin(ALICE, "cucumber", "write secrets")
    with pytest.raises(PermissionDeniedError):
        require_member(ALICE, "other", "read secrets")
