# app/api/routers/health.py
from fastapi import APIRouter, Request

from app.domain.schemas import HealthOut

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthOut)
def health(request: Request):
    return HealthOut(status="ok", service=request.app.state.service_name)
