"""Boundary Protocols — contracts the dev handlers and routes consume.

Invariants:
    - Every mutating or reading call takes the acting Identity explicitly (no ambient identity)
    - RoleStore.find_by_id is the only lookup that takes no identity
    - Implementations provided by services/ via constructor injection

Design Decisions:
    - Protocol over ABC: structural subtyping, tests can pass plain fakes
    - Async in Protocol: implementations do IO
"""

from typing import Protocol

from devgate.core.domain_types import Identity, ResourceId


class RoleLike(Protocol):
    """Structural contract for a role as returned by RoleStore."""
    role_id: str
    account: str
    api_key: str


class AccountStore(Protocol):
    """Account collection — root-privileged operations."""
    async def list_accounts(self, acting: Identity) -> list[str]: ...
    async def create_account(self, acting: Identity, account_id: str) -> dict: ...
    async def destroy_account(self, acting: Identity, account_id: str) -> None: ...
    async def purge(self, acting: Identity) -> dict[str, int]: ...


class RoleStore(Protocol):
    """Roles and their API keys."""
    async def find_by_id(self, role_id: str) -> RoleLike: ...
    async def create_role(self, acting: Identity, role_id: str) -> RoleLike: ...
    async def authenticate(self, api_key: str) -> RoleLike: ...
    async def rotate_api_key(self, acting: Identity) -> str: ...


class SecretStore(Protocol):
    """Versioned secret values keyed by ResourceId."""
    async def show(
        self, acting: Identity, resource: ResourceId, version: int | None = None,
    ) -> str: ...
    async def create(
        self, acting: Identity, resource: ResourceId, value: str,
    ) -> int: ...
