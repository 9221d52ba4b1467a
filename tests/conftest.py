# backend/tests/conftest.py
# -*- coding: utf-8 -*-
"""
Config global de tests para Mustashar.

- PYTHON_ENV=test antes de importar `app` (EnvTestingSettings, SQLite en memoria)
- Motor ASYNC sqlite+aiosqlite por test con StaticPool: todas las sesiones
  del test ven la misma base
- Tablas creadas desde Base.metadata (settlement, moderation, notifications)
- RecordingSink: sink de notificaciones en memoria para aserciones
"""

import os

os.environ.setdefault("PYTHON_ENV", "test")

from dataclasses import dataclass, field
from typing import List, Optional
from uuid import uuid4

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.shared.database.base import Base

# Registrar TODOS los modelos en Base.metadata
from app.modules.settlement.models import BalanceMovement, ConsultantBalance, WithdrawalRequest  # noqa: F401
from app.modules.moderation.models import ConsultationService  # noqa: F401
from app.modules.notifications.models import Notification  # noqa: F401
from app.modules.notifications.enums import NotificationSeverity


@dataclass
class SentNotification:
    recipient: object
    title: str
    message: str
    severity: NotificationSeverity
    link: Optional[str] = None


@dataclass
class RecordingSink:
    """Sink en memoria: guarda cada notify() en `sent`."""
    sent: List[SentNotification] = field(default_factory=list)

    async def notify(self, recipient, title, message, severity, link=None) -> None:
        self.sent.append(SentNotification(recipient, title, message, NotificationSeverity(severity), link))

    def for_recipient(self, recipient) -> List[SentNotification]:
        return [n for n in self.sent if n.recipient == recipient]


@pytest.fixture
async def engine():
    eng = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def consultant_id():
    return uuid4()


@pytest.fixture
def other_consultant_id():
    return uuid4()

# Fin del archivo backend/tests/conftest.py
