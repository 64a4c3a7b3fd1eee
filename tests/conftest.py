"""
Test configuration and fixtures for the Shopify SEO Audit API.

This module provides the necessary fixtures and configuration for running tests
with proper database isolation and environment setup.
"""

import os
import tempfile
from typing import AsyncGenerator, Generator

from dotenv import load_dotenv

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

load_dotenv()

test_db_url = os.getenv("TEST_DATABASE_URL")
if test_db_url:
    if "postgresql://" in test_db_url and "asyncpg" not in test_db_url:
        test_db_url = test_db_url.replace("postgresql://", "postgresql+asyncpg://")
    os.environ["DATABASE_URL"] = test_db_url
else:
    test_db_path = os.path.join(tempfile.mkdtemp(), "test_app.db")
    os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{test_db_path}"

os.environ.setdefault("LOG_DIR", tempfile.mkdtemp())


@pytest.fixture(scope="session")
def test_app():
    """Create FastAPI test application."""
    from app.main import app

    return app


@pytest.fixture(scope="function")
def client(test_app) -> Generator[TestClient, None, None]:
    """
    Create a test client for making HTTP requests.
    Entering the client runs the app lifespan, which creates the tables.
    """
    with TestClient(test_app) as test_client:
        yield test_client
    test_app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def db_session() -> AsyncGenerator:
    """
    An AsyncSession bound to a fresh SQLite database for each test.
    """
    from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

    from app.platform.db.session import init_db

    db_path = os.path.join(tempfile.mkdtemp(), "test_session.db")
    engine = create_async_engine(f"sqlite+aiosqlite:///{db_path}")
    await init_db(bind=engine)

    session_factory = async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
    async with session_factory() as session:
        yield session

    await engine.dispose()
