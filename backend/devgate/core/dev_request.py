"""Dev Request Parsing — query parameters → validated DevRequest.

Invariants:
    - Checks run in a fixed order: action present, resource_id well-formed, action recognized
    - account/kind/identifier are all set (resource_id supplied) or all None (absent)
    - The input mapping is never mutated
    - Empty strings count as missing everywhere

Design Decisions:
    - Pure function, no IO: the dispatcher fails before touching any handler or DB
    - require() lives on DevRequest so handlers name the parameter they need at the call site
"""

from collections.abc import Mapping
from dataclasses import dataclass

from devgate.core.domain_types import DevAction, ResourceId
from devgate.core.errors import (
    ActionNotRecognizedError, ActionRequiredError, CallerError,
    MissingParameterError,
)

# secrets.version is a 32-bit INTEGER column
MAX_VERSION = 2**31 - 1


@dataclass(frozen=True)
class DevRequest:
    """Decomposed /dev parameter set."""
    action: DevAction
    account: str | None = None
    kind: str | None = None
    identifier: str | None = None
    value: str | None = None
    role_id: str | None = None
    id: str | None = None
    version: str | None = None

    def require(self, name: str) -> str:
        """Return a non-empty parameter or raise MissingParameterError naming it."""
        val = getattr(self, name)
        if not val:
            raise MissingParameterError(name)
        return val

    def require_resource(self) -> ResourceId:
        if self.account is None:
            raise MissingParameterError("resource_id")
        return ResourceId(self.account, self.kind, self.identifier)

    def version_number(self) -> int | None:
        """Optional secret version; positive integer when given."""
        if not self.version:
            return None
        # isdigit() alone admits superscripts and other non-ASCII digits
        text = self.version
        if not (text.isascii() and text.isdigit()) or len(text) > 10:
            raise CallerError("version must be a positive integer", "INVALID_VERSION")
        number = int(text)
        if not 1 <= number <= MAX_VERSION:
            raise CallerError("version must be a positive integer", "INVALID_VERSION")
        return number


def parse_dev_request(query: Mapping[str, str]) -> DevRequest:
    action = query.get("action")
    if not action:
        raise ActionRequiredError()

    account = kind = identifier = None
    resource_id = query.get("resource_id")
    if resource_id:
        resource = ResourceId.parse(resource_id)
        account, kind, identifier = resource.account, resource.kind, resource.identifier

    try:
        tag = DevAction(action)
    except ValueError:
        raise ActionNotRecognizedError(action) from None

    return DevRequest(
        action=tag,
        account=account,
        kind=kind,
        identifier=identifier,
        value=query.get("value"),
        role_id=query.get("role_id"),
        id=query.get("id"),
        version=query.get("version"),
    )
