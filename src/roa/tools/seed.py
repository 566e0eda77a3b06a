from __future__ import annotations

from sqlalchemy import inspect

from roa.application.use_cases.seed_database import SeedDatabase
from roa.infrastructure.db.repositories.dataset_repo import SqlAlchemyDatasetRepository
from roa.infrastructure.db.session import get_engine
from roa.infrastructure.db.store_time import store_timezone
from roa.infrastructure.observability.logging_config import configure_logging


def main() -> None:
    configure_logging()
    engine = get_engine(timeout_seconds=2.0)
    inspector = inspect(engine)
    required_tables = {"restaurants", "orders"}
    if not required_tables.issubset(set(inspector.get_table_names())):
        print("no schema yet")
        return

    result = SeedDatabase(
        SqlAlchemyDatasetRepository(engine), store_zone=store_timezone()
    ).execute()
    print(f"seed complete: {result.data.restaurants} restaurants, {result.data.orders} orders")


if __name__ == "__main__":
    main()
