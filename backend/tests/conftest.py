from __future__ import annotations

import os

# Point the module-level engine at SQLite before the app is imported
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["API_PREFIX"] = ""

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

import hrm.models  # noqa: E402,F401
from hrm.core.database import Base  # noqa: E402
from hrm.core.dependencies import get_employee_service  # noqa: E402
from hrm.main import app  # noqa: E402
from hrm.services.employee_service import EmployeeService  # noqa: E402


@pytest.fixture
async def session_factory():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()


@pytest.fixture
def employee_service(session_factory):
    return EmployeeService(session_factory)


@pytest.fixture
async def async_client(employee_service):
    app.dependency_overrides[get_employee_service] = lambda: employee_service
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def ana_payload():
    return {"name": "Ana", "department": "Eng", "role": "Dev"}
