from __future__ import annotations

from fastapi import Request
from sqlalchemy.engine import Engine

from roa.infrastructure.db.session import get_engine
from roa.infrastructure.observability.otel import instrument_store


def get_store_engine(request: Request) -> Engine:
    engine: Engine | None = getattr(request.app.state, "engine", None)
    if engine is None:
        engine = get_engine()
        instrument_store(engine)
        request.app.state.engine = engine
    return engine
