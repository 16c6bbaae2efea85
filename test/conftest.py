"""
Test Configuration and Fixtures

This module provides:
- A throwaway SQLite database (aiosqlite) shared by the HTTP test client
- Table cleanup between integration tests
- Seller fixtures registered through the public API (helpers in test/shared/utils.py)

Architecture:
- Unit tests (test/**/unit/): marked `unit`, use AsyncMock ports, skip DB cleanup
- Integration tests: run the FastAPI app through TestClient against SQLite
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings are read at import time (src.platform.config.core_setting.settings)
# =============================================================================
import os
from pathlib import Path
import tempfile


_TEST_DB_DIR = Path(tempfile.mkdtemp(prefix='catalog_test_'))
_TEST_DB_PATH = _TEST_DB_DIR / 'catalog_test.db'


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    os.environ['DATABASE_URL'] = f'sqlite+aiosqlite:///{_TEST_DB_PATH}'
    os.environ['ADMIN_EMAILS'] = 'admin@catalogo.com.br'
    os.environ['PUBLIC_BASE_URL'] = 'https://link-app-ruby.vercel.app'
    os.environ['WHATSAPP_COUNTRY_CODE'] = '55'
    os.environ['MAX_IMAGE_BYTES'] = str(1024 * 1024)
    os.environ['LOGIN_MAX_ATTEMPTS'] = '3'

    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from collections.abc import Callable, Generator  # noqa: E402
from typing import Any  # noqa: E402

from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402
from sqlalchemy import create_engine, text  # noqa: E402

from test.shared.utils import register_seller  # noqa: E402
from test.util_constant import (  # noqa: E402
    ADMIN_EMAIL,
    ADMIN_USERNAME,
    ANOTHER_SELLER_EMAIL,
    ANOTHER_SELLER_USERNAME,
    TEST_SELLER_DISPLAY_NAME,
    TEST_SELLER_EMAIL,
    TEST_SELLER_PHONE,
    TEST_SELLER_USERNAME,
)


# =============================================================================
# Database Cleanup
# =============================================================================
# Children first (product -> seller -> account)
_TABLES = ('product', 'seller', 'account')


def _clean_all_tables() -> None:
    if not _TEST_DB_PATH.exists():
        return
    engine = create_engine(f'sqlite:///{_TEST_DB_PATH}')
    try:
        with engine.begin() as conn:
            existing = {
                row[0]
                for row in conn.execute(text("SELECT name FROM sqlite_master WHERE type='table'"))
            }
            for table in _TABLES:
                if table in existing:
                    conn.execute(text(f'DELETE FROM {table}'))
    finally:
        engine.dispose()


@pytest.fixture(autouse=True)
def clean_database(request: pytest.FixtureRequest) -> Generator[None, None, None]:
    # Skip for unit tests - they don't use the database or the HTTP client
    if 'unit' in [m.name for m in request.node.iter_markers()]:
        yield
        return

    from src.platform.config.di import cleanup

    # Lazily get client so the app (and its schema) exists before cleaning
    client: TestClient = request.getfixturevalue('client')
    _clean_all_tables()
    # Fresh login throttling and push subscribers per test
    cleanup()
    client.cookies.clear()
    yield
    client.cookies.clear()


# =============================================================================
# Session-scoped Fixtures
# =============================================================================
@pytest.fixture(scope='session')
def client() -> Generator[TestClient, None, None]:
    from test.test_main import app

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


# =============================================================================
# Seller Fixtures
# =============================================================================
@pytest.fixture
def seller(client: TestClient) -> dict[str, Any]:
    """Registered seller with WhatsApp; the client holds the seller's session cookie."""
    return register_seller(
        client,
        username=TEST_SELLER_USERNAME,
        email=TEST_SELLER_EMAIL,
        phone=TEST_SELLER_PHONE,
        display_name=TEST_SELLER_DISPLAY_NAME,
    )


@pytest.fixture
def another_seller(client: TestClient) -> Callable[[], dict[str, Any]]:
    """Factory: registers a second seller (no phone) and leaves the client logged in as them."""

    def _register() -> dict[str, Any]:
        client.cookies.clear()
        return register_seller(client, username=ANOTHER_SELLER_USERNAME, email=ANOTHER_SELLER_EMAIL)

    return _register


@pytest.fixture
def admin(client: TestClient) -> Callable[[], dict[str, Any]]:
    def _register() -> dict[str, Any]:
        client.cookies.clear()
        return register_seller(client, username=ADMIN_USERNAME, email=ADMIN_EMAIL)

    return _register


# =============================================================================
# SSE Fixtures
# =============================================================================
@pytest.fixture(scope='module')
def http_server() -> Generator[str, None, None]:
    """Base URL of a real server process sharing the test database."""
    from test.shared.http_server import start_http_server

    yield from start_http_server()
