"""Budget endpoints for the API."""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from components.budget.repository import BudgetRepository
from components.budget import schemas
from components.core import schemas as core_schemas
from components.core.events import event_bus, BUDGETS_CHANGED
from components.core.init_db import get_db

router = APIRouter(
    prefix="/budgets",
    tags=["budgets"],
    responses={404: {"description": "Not found"}},
)


@router.post("", response_model=schemas.Budget, status_code=status.HTTP_201_CREATED)
async def upsert_budget(
    budget: schemas.BudgetUpsert,
    db: AsyncSession = Depends(get_db)
):
    """
    Set the budget of a category for a month.

    There is at most one budget per category and month: posting again
    replaces the amount and keeps the existing id.
    """
    repo = BudgetRepository(db)
    saved = await repo.upsert(category=budget.category, amount=budget.amount, month=budget.month)
    event_bus.publish(BUDGETS_CHANGED, {"action": "upserted", "id": saved.id})
    return saved


@router.get("", response_model=List[schemas.Budget])
async def read_budgets(
    month: Optional[str] = Query(None, description="Month in YYYY-MM format; omit for all months"),
    db: AsyncSession = Depends(get_db)
):
    """Get budgets, optionally filtered to one month."""
    repo = BudgetRepository(db)
    return await repo.list_by_month(month)


@router.delete("", response_model=core_schemas.Message)
async def delete_budget(
    budget: schemas.BudgetDelete,
    db: AsyncSession = Depends(get_db)
):
    """Delete a budget."""
    repo = BudgetRepository(db)
    await repo.delete(budget.id)
    event_bus.publish(BUDGETS_CHANGED, {"action": "deleted", "id": budget.id})
    return {"message": "Budget deleted successfully"}
