"""Root conftest — shared test configuration."""

import os

# Never touch a developer's local database file from tests
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("DEV_ENDPOINT_ENABLED", "true")
os.environ.setdefault("DEV_ERROR_MODE", "raise")
