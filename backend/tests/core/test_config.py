"""Settings — database URL normalization shared by the app and alembic.

Invariants:
    - postgresql:// is rewritten to postgresql+asyncpg://
    - Any other URL is left as given
"""

from devgate.config import Settings


def test_postgres_url_gets_asyncpg_driver():
    settings = Settings(database_url="postgresql://u:p@db/devgate")
    assert settings.database_url == "postgresql+asyncpg://u:p@db/devgate"


def test_sqlite_url_untouched():
    settings = Settings(database_url="sqlite+aiosqlite:///./x.db")
    assert settings.database_url == "sqlite+aiosqlite:///./x.db"
