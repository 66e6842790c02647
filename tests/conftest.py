"""Pytest configuration and fixtures for Pourfolio tests with real MongoDB."""

import asyncio
import os
import uuid
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import pytest
import pytest_asyncio
from beanie import init_beanie
from httpx import ASGITransport, AsyncClient
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError

from pourfolio.database import get_document_models
from pourfolio.models import User
from pourfolio.rate_limit import limiter
from pourfolio.auth.backend import get_jwt_strategy
from pourfolio.services.auth import get_password_hash


# MongoDB connection URL for tests (can be overridden with env var)
TEST_MONGODB_URL = os.environ.get("TEST_MONGODB_URL", "mongodb://localhost:27017")


# Create a test-specific app to avoid lifespan conflicts
def create_test_app():
    """Create a FastAPI app configured for testing (no database lifespan)."""
    from fastapi import FastAPI
    from pourfolio import __version__

    # Empty lifespan for testing - we manage the database ourselves
    @asynccontextmanager
    async def test_lifespan(app: FastAPI):
        yield

    test_app = FastAPI(
        title="Pourfolio Test",
        version=__version__,
        lifespan=test_lifespan,
    )

    # Copy all routes from the main app, health check included
    from pourfolio.main import app as main_app

    for route in main_app.routes:
        test_app.routes.append(route)

    test_app.state.limiter = limiter
    # Copied routes resolve overrides through the main app
    test_app.dependency_overrides = main_app.dependency_overrides

    return test_app


# Get or create test app (singleton for test session)
_test_app = None


def get_test_app():
    """Get the test app singleton."""
    global _test_app
    if _test_app is None:
        _test_app = create_test_app()
    return _test_app


@pytest.fixture(scope="session")
def event_loop_policy():
    """Use the default event loop policy."""
    return asyncio.DefaultEventLoopPolicy()


@pytest.fixture(autouse=True)
def disable_rate_limits():
    """Turn the shared limiter off so repeated requests are never throttled."""
    limiter.enabled = False
    yield
    limiter.enabled = True


@pytest.fixture
def test_app():
    """Test app with dependency overrides cleared after each test."""
    app = get_test_app()
    yield app
    app.dependency_overrides.clear()


@pytest_asyncio.fixture(scope="function")
async def mongo_client():
    """Create a MongoDB client for testing, skipping when no server answers.

    Function-scoped to avoid event loop issues with pytest-xdist.
    """
    client = AsyncIOMotorClient(
        TEST_MONGODB_URL,
        maxPoolSize=10,
        minPoolSize=1,
        serverSelectionTimeoutMS=2000,
    )
    try:
        await client.admin.command("ping")
    except PyMongoError:
        client.close()
        pytest.skip(f"MongoDB not reachable at {TEST_MONGODB_URL}")
    yield client
    client.close()


@pytest_asyncio.fixture(scope="function")
async def init_test_db(mongo_client):
    """Initialize Beanie with a unique test database.

    Creates a unique database for each test function and drops it after the test.
    """
    db_name = f"test_pourfolio_{uuid.uuid4().hex[:8]}"
    db = mongo_client[db_name]

    await init_beanie(
        database=db,
        document_models=get_document_models(),
    )
    yield db

    # Cleanup: drop the entire test database
    await mongo_client.drop_database(db_name)


async def create_user(email: str, password: str = "testpassword") -> User:
    """Insert an active, verified user."""
    user = User(
        email=email,
        hashed_password=get_password_hash(password),
        is_active=True,
        is_verified=True,
        is_superuser=False,
    )
    await user.insert()
    return user


async def bearer_token(user: User) -> str:
    """Issue a token the same way POST /api/auth/login does."""
    return await get_jwt_strategy().write_token(user)


@pytest_asyncio.fixture(scope="function")
async def test_user(init_test_db) -> User:
    """The default authenticated user."""
    return await create_user("test@example.com")


@pytest_asyncio.fixture(scope="function")
async def client(test_app, test_user) -> AsyncGenerator[AsyncClient, None]:
    """Create an async test client authenticated as ``test_user``."""
    access_token = await bearer_token(test_user)

    transport = ASGITransport(app=test_app)
    async with AsyncClient(
        transport=transport,
        base_url="http://test",
        headers={"Authorization": f"Bearer {access_token}"},
    ) as ac:
        yield ac


@pytest_asyncio.fixture(scope="function")
async def other_client(test_app, init_test_db) -> AsyncGenerator[AsyncClient, None]:
    """Client authenticated as a second user, for ownership checks."""
    other = await create_user("other@example.com")
    access_token = await bearer_token(other)

    transport = ASGITransport(app=test_app)
    async with AsyncClient(
        transport=transport,
        base_url="http://test",
        headers={"Authorization": f"Bearer {access_token}"},
    ) as ac:
        yield ac


@pytest_asyncio.fixture(scope="function")
async def unauthenticated_client(test_app, init_test_db) -> AsyncGenerator[AsyncClient, None]:
    """Create an async test client without authentication."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(
        transport=transport,
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
def sample_image_bytes() -> bytes:
    """Create sample image bytes for testing."""
    # Minimal valid PNG (1x1 pixel, red)
    png_data = bytes([
        0x89, 0x50, 0x4E, 0x47, 0x0D, 0x0A, 0x1A, 0x0A,  # PNG signature
        0x00, 0x00, 0x00, 0x0D,  # IHDR length
        0x49, 0x48, 0x44, 0x52,  # IHDR
        0x00, 0x00, 0x00, 0x01,  # width: 1
        0x00, 0x00, 0x00, 0x01,  # height: 1
        0x08, 0x02,  # bit depth: 8, color type: RGB
        0x00, 0x00, 0x00,  # compression, filter, interlace
        0x90, 0x77, 0x53, 0xDE,  # CRC
        0x00, 0x00, 0x00, 0x0C,  # IDAT length
        0x49, 0x44, 0x41, 0x54,  # IDAT
        0x08, 0xD7, 0x63, 0xF8, 0xFF, 0xFF, 0x3F, 0x00,  # compressed data
        0x05, 0xFE, 0x02, 0xFE,  # CRC
        0xA3, 0x1A, 0x8D, 0xEB,  # CRC
        0x00, 0x00, 0x00, 0x00,  # IEND length
        0x49, 0x45, 0x4E, 0x44,  # IEND
        0xAE, 0x42, 0x60, 0x82,  # CRC
    ])
    return png_data
