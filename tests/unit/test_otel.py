from __future__ import annotations

import gc
import weakref
import sys
from pathlib import Path

from sqlalchemy import create_engine

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

import roa.infrastructure.observability.otel as otel


class RecordingInstrumentor:
    engines: list[object] = []

    def instrument(self, engine, tracer_provider) -> None:
        self.engines.append(engine)


def test_instrument_store_once_per_engine(monkeypatch) -> None:
    RecordingInstrumentor.engines = []
    monkeypatch.setattr(otel, "SQLAlchemyInstrumentor", RecordingInstrumentor)

    first = create_engine("sqlite://")
    otel.instrument_store(first)
    otel.instrument_store(first)
    second = create_engine("sqlite://")
    otel.instrument_store(second)

    assert RecordingInstrumentor.engines == [first, second]


def test_registry_does_not_keep_engines_alive(monkeypatch) -> None:
    RecordingInstrumentor.engines = []
    monkeypatch.setattr(otel, "SQLAlchemyInstrumentor", RecordingInstrumentor)

    engine = create_engine("sqlite://")
    otel.instrument_store(engine)
    assert engine in otel._INSTRUMENTED_ENGINES

    engine_ref = weakref.ref(engine)
    RecordingInstrumentor.engines = []
    engine.dispose()
    del engine
    gc.collect()

    assert engine_ref() is None
