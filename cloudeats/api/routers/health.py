# cloudeats/api/routers/health.py
from datetime import datetime, timezone

from fastapi import APIRouter, Request

from cloudeats.domain.schemas import HealthOut

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthOut)
def health(request: Request):
    return {
        "service": request.app.state.service_name,
        "status": "ok",
        "timestamp": datetime.now(timezone.utc),
    }
