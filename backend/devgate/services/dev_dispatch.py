"""Dev Dispatch — explicit routing from a /dev action tag to its handler.

Invariants:
    - Every action->handler mapping is visible — no getattr magic, no auto-discovery
    - Parsing (action present, resource_id well-formed, action recognized) completes
      before any handler is looked up; a parse failure invokes nothing
    - The handler's Response is returned unmodified
    - One synchronous delegated call per request: no retry, no fallback

Design Decisions:
    - Explicit dict over getattr: every mapping visible in one place
    - Unknown tags raise ActionNotRecognizedError — never a default success; the soft
      {"error": ...} rendering is the route's concern, not the dispatcher's
"""

import logging
from collections.abc import Awaitable, Callable, Mapping

from sqlalchemy.ext.asyncio import AsyncSession
from starlette.responses import Response

from devgate.core.dev_request import DevRequest, parse_dev_request
from devgate.core.domain_types import DevAction
from devgate.services.dev_handlers import DevHandlers

logger = logging.getLogger(__name__)

DevHandler = Callable[[DevRequest], Awaitable[Response]]


class DevDispatch:
    """Routes action tag -> handler. Explicit registration, no auto-discovery."""

    def __init__(self, db: AsyncSession, handlers: DevHandlers | None = None):
        if handlers is None:
            handlers = DevHandlers(db)

        # Adding an action requires editing this dict
        self._handlers: dict[DevAction, DevHandler] = {
            # Accounts (root-equivalent)
            DevAction.LIST_ACCOUNTS: handlers.list_accounts,
            DevAction.CREATE_ACCOUNT: handlers.create_account,
            DevAction.DESTROY_ACCOUNT: handlers.destroy_account,
            DevAction.PURGE: handlers.purge,

            # Roles (direct lookup)
            DevAction.RETRIEVE_API_KEY: handlers.retrieve_api_key,

            # Secrets (<account>:user:admin)
            DevAction.GET_SECRET: handlers.get_secret,
            DevAction.CREATE_SECRET: handlers.create_secret,
            DevAction.LOAD_POLICY: handlers.create_secret,
        }

    async def execute(self, query: Mapping[str, str]) -> Response:
        params = parse_dev_request(query)
        handler = self._handlers[params.action]
        logger.info(
            f"Dev action {params.action.value}",
            extra={"action": params.action.value, "account": params.account},
        )
        return await handler(params)
