"""Integration test fixtures for database tests.

These fixtures require a running PostgreSQL instance reachable through the
GATEWAY_DB_* environment variables. Integration tests are deselected by
default; run them with ``pytest -m integration``.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator, Generator
import os
from pathlib import Path
from unittest.mock import patch

from alembic import command
from alembic.config import Config
import pytest
import pytest_asyncio
from pydantic import SecretStr
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from infrastructure.database.engines import create_write_engine
from infrastructure.settings import DatabaseSettings

ALEMBIC_INI = Path(__file__).resolve().parents[2] / "alembic.ini"


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (requires database)",
    )


@pytest.fixture(scope="session")
def integration_db_settings() -> DatabaseSettings:
    """Database settings for integration tests.

    Override with environment variables:
        GATEWAY_DB_HOST, GATEWAY_DB_PORT, etc.
    """
    return DatabaseSettings(
        host=os.getenv("GATEWAY_DB_HOST", "localhost"),
        port=int(os.getenv("GATEWAY_DB_PORT", "5432")),
        database=os.getenv("GATEWAY_DB_DATABASE", "tenant_gateway"),
        username=os.getenv("GATEWAY_DB_USERNAME", "tenant_gateway"),
        password=SecretStr(
            os.getenv("GATEWAY_DB_PASSWORD", "tenant_gateway_dev_password")
        ),
    )


@pytest.fixture(scope="session")
def migrated_database(
    integration_db_settings: DatabaseSettings,
) -> Generator[DatabaseSettings, None, None]:
    """Apply every Alembic revision to the integration database.

    Runs the migration environment against the same settings the tests use.
    """
    config = Config(str(ALEMBIC_INI))
    with patch(
        "infrastructure.settings.get_database_settings",
        return_value=integration_db_settings,
    ):
        command.upgrade(config, "head")
    yield integration_db_settings


@pytest_asyncio.fixture
async def integration_engine(
    migrated_database: DatabaseSettings,
) -> AsyncGenerator[AsyncEngine, None]:
    """Provide a write engine on the migrated database."""
    engine = create_write_engine(migrated_database)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(
    integration_engine: AsyncEngine,
) -> async_sessionmaker[AsyncSession]:
    """Provide a session factory configured like the application's."""
    return async_sessionmaker(integration_engine, expire_on_commit=False)


@pytest_asyncio.fixture
async def clean_deletion_logs(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[None, None]:
    """Empty delete_user_log before and after each test."""

    async def cleanup() -> None:
        async with session_factory() as session:
            async with session.begin():
                await session.execute(text("DELETE FROM delete_user_log"))

    await cleanup()
    yield
    await cleanup()
