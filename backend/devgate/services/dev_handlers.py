"""Dev Handlers — one method per /dev action, each impersonating an acting identity.

Invariants:
    - Account operations act as Identity.root(); secret operations act as
      Identity.account_admin(<account from resource_id>); retrieve_api_key acts as nobody
    - The impersonated identity is a local per call — never stored on the handler or request
    - Required parameters validated before any service call
    - Service results are returned verbatim: JSON for collections/records, plain text for scalars
    - Service errors propagate unwrapped

Design Decisions:
    - Direct service calls instead of driving production routes: the routes and these
      handlers share AccountService/RoleService/SecretService
    - load_policy is create_secret under another tag; the kind comes from resource_id
"""

from fastapi import status
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from devgate.core.dev_request import DevRequest
from devgate.core.domain_types import Identity
from devgate.core.repository_protocols import AccountStore, RoleStore, SecretStore
from devgate.services.accounts import AccountService
from devgate.services.roles import RoleService
from devgate.services.secrets import SecretService


class DevHandlers:
    """The seven /dev operations."""

    def __init__(self, db: AsyncSession):
        self.accounts: AccountStore = AccountService(db)
        self.roles: RoleStore = RoleService(db)
        self.secrets: SecretStore = SecretService(db)

    async def list_accounts(self, params: DevRequest) -> JSONResponse:
        accounts = await self.accounts.list_accounts(Identity.root())
        return JSONResponse(accounts)

    async def create_account(self, params: DevRequest) -> JSONResponse:
        account_id = params.require("id")
        created = await self.accounts.create_account(Identity.root(), account_id)
        return JSONResponse(created, status_code=status.HTTP_201_CREATED)

    async def destroy_account(self, params: DevRequest) -> JSONResponse:
        account_id = params.require("id")
        await self.accounts.destroy_account(Identity.root(), account_id)
        return JSONResponse({"id": account_id, "destroyed": True})

    async def retrieve_api_key(self, params: DevRequest) -> PlainTextResponse:
        role = await self.roles.find_by_id(params.require("role_id"))
        return PlainTextResponse(role.api_key)

    async def get_secret(self, params: DevRequest) -> PlainTextResponse:
        resource = params.require_resource()
        version = params.version_number()
        value = await self.secrets.show(
            Identity.account_admin(resource.account), resource, version,
        )
        return PlainTextResponse(value)

    async def create_secret(self, params: DevRequest) -> JSONResponse:
        resource = params.require_resource()
        value = params.require("value")
        version = await self.secrets.create(
            Identity.account_admin(resource.account), resource, value,
        )
        return JSONResponse(
            {"id": str(resource), "version": version},
            status_code=status.HTTP_201_CREATED,
        )

    async def purge(self, params: DevRequest) -> JSONResponse:
        counts = await self.accounts.purge(Identity.root())
        return JSONResponse({"purged": counts})
