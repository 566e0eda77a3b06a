from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from roa.api.main import create_app
from roa.infrastructure.db.models.base import Base
from roa.infrastructure.db.models.order import OrderModel  # noqa: F401
from roa.infrastructure.db.models.restaurant import RestaurantModel  # noqa: F401
from roa.infrastructure.db.session import enable_sqlite_foreign_keys


@pytest.fixture(autouse=True)
def utc_store(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STORE_TIMEZONE", "UTC")


@pytest.fixture
def sqlite_engine() -> Iterator[Engine]:
    engine = enable_sqlite_foreign_keys(
        create_engine(
            "sqlite+pysqlite://",
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def api_client(sqlite_engine: Engine) -> Iterator[TestClient]:
    with TestClient(create_app(engine=sqlite_engine), raise_server_exceptions=False) as client:
        yield client
