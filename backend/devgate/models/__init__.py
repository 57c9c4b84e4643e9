"""ORM Models — SQLAlchemy declarative models for the account/role/secret store.

Invariants:
    - All models inherit from Base (db/base.py)
    - Account is the aggregate root; roles and secrets are scoped by account

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs (ADR: standard SQLAlchemy pattern)
"""

from devgate.models.account import Account  # noqa: F401
from devgate.models.role import Role  # noqa: F401
from devgate.models.secret import Secret  # noqa: F401
