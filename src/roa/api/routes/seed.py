from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.engine import Engine

from roa.api.dependencies import get_store_engine
from roa.application.dto.responses import SeedResponse
from roa.application.use_cases.seed_database import SeedDatabase
from roa.infrastructure.db.repositories.dataset_repo import SqlAlchemyDatasetRepository
from roa.infrastructure.db.store_time import store_timezone

router = APIRouter(tags=["seed"])


@router.post("/api/seed", response_model=SeedResponse)
def seed_database(engine: Engine = Depends(get_store_engine)) -> SeedResponse:
    return SeedDatabase(
        dataset_repository=SqlAlchemyDatasetRepository(engine),
        store_zone=store_timezone(),
    ).execute()
