# app/review_service/schemas.py
from pydantic import BaseModel, Field


class ReviewOut(BaseModel):
    """
    Schema dla recenzji (response).
    Naglowek recenzji bywa w "title" albo w "name" - zwracane jest tylko to pole, ktore rekord ma.
    """

    id: int
    title: str | None = None
    name: str | None = None
    description: str
    grade: int = Field(..., ge=1, le=5, description="Ocena 1-5")
    product: int = Field(..., description="ID produktu (niezweryfikowane)")
