"""Role Service — lookup, creation, authentication and key rotation."""

import pytest

from devgate.core.domain_types import Identity
from devgate.core.errors import (
    AuthenticationError, CallerError, ConflictError, PermissionDeniedError,
    ResourceNotFoundError,
)
from devgate.services.roles import RoleService


async def test_find_by_id_returns_role(test_db, alice):
    role = await RoleService(test_db).find_by_id("cucumber:user:alice")
    assert role.api_key == alice.api_key
    assert role.account == "cucumber"


async def test_find_by_id_miss_is_not_found(test_db, cucumber):
    with pytest.raises(ResourceNotFoundError) as exc:
        await RoleService(test_db).find_by_id("cucumber:user:nobody")
    assert exc.value.http_status == 404


async def test_find_by_id_malformed(test_db):
    with pytest.raises(CallerError) as exc:
        await RoleService(test_db).find_by_id("alice")
    assert exc.value.code == "MALFORMED_ROLE_ID"


async def test_create_role_requires_admin(test_db, alice):
    with pytest.raises(PermissionDeniedError):
        await RoleService(test_db).create_role(
            Identity("cucumber:user:alice"), "cucumber:host:app",
        )


async def test_create_role_duplicate(test_db, alice):
    with pytest.raises(ConflictError):
        await RoleService(test_db).create_role(
            Identity.account_admin("cucumber"), "cucumber:user:alice",
        )


async def test_create_role_in_missing_account(test_db):
    with pytest.raises(ResourceNotFoundError):
        await RoleService(test_db).create_role(Identity.root(), "missing:user:bob")


async def test_authenticate(test_db, alice):
    role = await RoleService(test_db).authenticate(alice.api_key)
    assert role.role_id == "cucumber:user:alice"
    with pytest.raises(AuthenticationError):
        await RoleService(test_db).authenticate("not-a-key")


async def test_rotate_api_key_invalidates_old_key(test_db, alice):
    old = alice.api_key
    service = RoleService(test_db)

    new = await service.rotate_api_key(Identity("cucumber:user:alice"))

    assert new != old
    assert (await service.authenticate(new)).role_id == "cucumber:user:alice"
    with pytest.raises(AuthenticationError):
        await service.authenticate(old)
