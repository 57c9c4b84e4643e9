"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - ResourceId is always a full account:kind:identifier triple (never partial)
    - Identity is the acting role for one call — constructed, passed explicitly, discarded
    - All dev action tags encoded as an Enum — no raw string matching outside parsing

Design Decisions:
    - Frozen dataclasses over NewType for ids: parsing and formatting live with the type
    - str Enums: serialize to JSON without custom encoders
    - A resource id splits on every ':' into exactly three non-empty parts, so an
      identifier may contain '/' but never ':' (matches how role ids are written)
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType

from devgate.core.errors import MalformedResourceIdError


AccountId = NewType("AccountId", str)

ROOT_ROLE_ID = "!:user:root"
ADMIN_LOGIN = "admin"


# ─── Enums ───────────────────────────────────────────────────────

class DevAction(str, Enum):
    """Recognized /dev action tags."""
    LIST_ACCOUNTS = "list_accounts"
    CREATE_ACCOUNT = "create_account"
    DESTROY_ACCOUNT = "destroy_account"
    RETRIEVE_API_KEY = "retrieve_api_key"
    GET_SECRET = "get_secret"
    CREATE_SECRET = "create_secret"
    LOAD_POLICY = "load_policy"
    PURGE = "purge"


# ─── Identifiers ─────────────────────────────────────────────────

@dataclass(frozen=True)
class ResourceId:
    """Fully qualified resource — account:kind:identifier."""
    account: str
    kind: str
    identifier: str

    @classmethod
    def parse(cls, text: str) -> "ResourceId":
        parts = text.split(":")
        if len(parts) != 3 or not all(parts):
            raise MalformedResourceIdError(text)
        return cls(*parts)

    def __str__(self) -> str:
        return f"{self.account}:{self.kind}:{self.identifier}"


@dataclass(frozen=True)
class Identity:
    """Acting identity for a single service call."""
    role_id: str

    @classmethod
    def root(cls) -> "Identity":
        return cls(ROOT_ROLE_ID)

    @classmethod
    def account_admin(cls, account: str) -> "Identity":
        return cls(f"{account}:user:{ADMIN_LOGIN}")

    @property
    def is_root(self) -> bool:
        return self.role_id == ROOT_ROLE_ID

    @property
    def account(self) -> str:
        return self.role_id.split(":", 1)[0]

    def is_admin_of(self, account: str) -> bool:
        return self.role_id == f"{account}:user:{ADMIN_LOGIN}"
