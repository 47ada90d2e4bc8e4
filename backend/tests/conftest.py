"""
Employee List Backend — Test Configuration (conftest.py)
==========================================================

What:  Shared pytest fixtures for the entire test suite.
Why:   Provides reusable test infrastructure (store handles, API clients,
       mocked repositories, sample data).
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── database:            Connected in-memory SQLite store handle (fresh per test)
    ├── test_client:         HTTPX AsyncClient against an app using `database`
    ├── unavailable_client:  HTTPX AsyncClient against an app with no DATABASE_URL
    ├── mock_repository:     AsyncMock of EmployeeRepository for unit tests
    └── sample_employee_data: Request body for a valid employee
"""

import os
import tempfile
from pathlib import Path

# Override settings BEFORE any employee_api import reads them
FRONTEND_DIR = Path(tempfile.mkdtemp(prefix="employeelist_frontend_"))
(FRONTEND_DIR / "index.html").write_text(
    "<!doctype html><html><body><app-root></app-root></body></html>",
    encoding="utf-8",
)
(FRONTEND_DIR / "main.js").write_text("console.log('employee list');\n", encoding="utf-8")

os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["DB_CREATE_SCHEMA"] = "true"
os.environ["FRONTEND_DIST"] = str(FRONTEND_DIR)
os.environ["LOG_LEVEL"] = "WARNING"

from unittest.mock import AsyncMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from employee_api.database import Database  # noqa: E402
from employee_api.repositories.employee_repository import EmployeeRepository  # noqa: E402

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def sample_employee_data():
    """Valid POST body, matching the create scenario in the API docs."""
    return {
        "name": "Alice",
        "location": "NY",
        "position": "Engineer",
        "salary": 90000,
    }


@pytest.fixture
def mock_repository():
    """
    An EmployeeRepository stand-in whose methods are AsyncMocks.

    Usage:
        mock_repository.find_by_id.return_value = None
        service = EmployeeService(mock_repository)
    """
    repository = AsyncMock(spec=EmployeeRepository)
    repository.find_all = AsyncMock(return_value=[])
    repository.find_by_id = AsyncMock(return_value=None)
    repository.insert = AsyncMock()
    repository.save = AsyncMock()
    repository.delete = AsyncMock(return_value=None)
    return repository


@pytest_asyncio.fixture
async def database():
    """
    A connected store handle on a private in-memory SQLite database.

    Each test gets its own engine, so data never leaks between tests.
    """
    db = Database(TEST_DATABASE_URL, create_schema=True)
    connected = await db.connect()
    assert connected, "in-memory SQLite should always connect"
    yield db
    await db.disconnect()


@pytest_asyncio.fixture
async def test_client(database):
    """
    HTTPX AsyncClient routed straight into a fresh app (no server needed).

    ASGITransport does not run the lifespan, so the app is handed the
    already-connected `database` fixture.
    """
    from employee_api.main import create_app

    app = create_app(database=database)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def unavailable_client():
    """Client for an app whose persistence was never configured (degraded mode)."""
    from employee_api.main import create_app

    app = create_app(database=Database(None))
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
