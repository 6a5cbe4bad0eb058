"""
Test configuration and fixtures for the gate queue service
"""

import os
import tempfile

# Set test environment before importing the app
os.environ.update({
    "APP_ENV": "testing",
    "DATABASE_URL": "sqlite+aiosqlite:///:memory:",
    "FONNTE_TOKEN": "",
    "DOCUMENT_DIR": tempfile.mkdtemp(prefix="gatequeue-docs-"),
})

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.pool import StaticPool

from gatequeue.db.base import Base, build_engine, build_session_factory, get_db, get_session_factory
from gatequeue.domain.enums import GateStatus, GateType, QueueStatus
from gatequeue.domain.gate import GateConfig
from gatequeue.domain.mixins import utcnow
from gatequeue.repositories.driver import DriverRepository
from gatequeue.services.documents import DocumentStorage
from gatequeue.services.notifier import NotificationResult, get_notifier
from gatequeue.services.queue import QueueService


class FakeNotifier:
    """Records every message instead of calling the gateway."""

    def __init__(self, result: NotificationResult | None = None, error: Exception | None = None):
        self.sent: list[tuple[str, str]] = []
        self._result = result or NotificationResult(True)
        self._error = error

    async def send(self, destination: str, text: str) -> NotificationResult:
        self.sent.append((destination, text))
        if self._error:
            raise self._error
        return self._result


@pytest.fixture
async def engine():
    engine = build_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def gates(session_factory):
    """GATE 2 (priority) and GATE 1 open, GATE 5 closed."""
    rows = [
        GateConfig(id="gate-1", name="GATE 1", type=GateType.DOCK.value, status=GateStatus.OPEN.value),
        GateConfig(id="gate-2", name="GATE 2", type=GateType.DOCK.value, status=GateStatus.OPEN.value),
        GateConfig(id="gate-5", name="GATE 5", type=GateType.DOCK.value, status=GateStatus.CLOSED.value),
    ]
    async with session_factory() as s:
        s.add_all(rows)
        await s.commit()
    return rows


@pytest.fixture
def notifier():
    return FakeNotifier()


@pytest.fixture
def documents(tmp_path):
    return DocumentStorage(directory=tmp_path, base_url="/documents", max_bytes=1024)


@pytest.fixture
def service(session, notifier, documents, session_factory):
    return QueueService(session, notifier=notifier, documents=documents, log_sessions=session_factory)


_counter = iter(range(1, 1000))


@pytest.fixture
def make_driver(session):
    """Insert a driver directly in the given status."""

    async def _make(status: QueueStatus = QueueStatus.CHECKED_IN, **overrides):
        n = next(_counter)
        fields = {
            "id": f"WH-20250101-{n:03d}",
            "name": f"Driver {n}",
            "phone": "081234567890",
            "license_plate": f"B {1000 + n} XYZ",
            "company": "PT Vendor",
            "do_number": f"PO/SBI/2025/{n}",
            "status": status.value,
            "check_in_time": utcnow(),
        }
        fields.update(overrides)
        driver = await DriverRepository(session).create(**fields)
        await session.commit()
        return driver

    return _make


@pytest.fixture
async def client(session_factory, notifier, gates):
    from gatequeue.main import app

    async def _get_db():
        async with session_factory() as s:
            try:
                yield s
                await s.commit()
            except Exception:
                await s.rollback()
                raise

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_session_factory] = lambda: session_factory
    app.dependency_overrides[get_notifier] = lambda: notifier
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
