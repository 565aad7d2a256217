# app/domain/schemas.py
from pydantic import BaseModel


class HealthOut(BaseModel):
    """Schema dla /health (response)."""

    status: str
    service: str
