"""Category reference data endpoints."""

from typing import List
from fastapi import APIRouter

from components.category import registry, schemas

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=List[schemas.CategoryOption])
async def read_category_options():
    """Get value/label pairs of all known categories."""
    return registry.category_options()
