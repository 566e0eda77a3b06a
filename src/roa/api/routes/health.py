from __future__ import annotations

from fastapi import APIRouter, Request, Response, status

from roa.infrastructure.db.session import ping_database

router = APIRouter()


@router.get("/health/live")
def live() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/health/ready")
def ready(request: Request, response: Response) -> dict[str, object]:
    engine = getattr(request.app.state, "engine", None)
    store_ready = ping_database(engine=engine, timeout_seconds=1.0)

    if store_ready:
        return {"status": "ok"}

    response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return {
        "status": "unavailable",
        "checks": {"store": store_ready},
    }
