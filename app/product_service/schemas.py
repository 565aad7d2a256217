# app/product_service/schemas.py
from pydantic import BaseModel


class ProductOut(BaseModel):
    """Schema dla produktu (response)."""

    id: int
    name: str
