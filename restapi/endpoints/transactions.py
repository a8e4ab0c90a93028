"""Transaction endpoints for the API."""

from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from components.core import schemas as core_schemas
from components.core.events import event_bus, TRANSACTIONS_CHANGED
from components.core.init_db import get_db
from components.transaction.repository import TransactionRepository
from components.transaction import schemas

router = APIRouter(
    prefix="/transactions",
    tags=["transactions"],
    responses={404: {"description": "Not found"}},
)


@router.post("", response_model=schemas.Transaction, status_code=status.HTTP_201_CREATED)
async def create_transaction(
    transaction: schemas.TransactionCreate,
    db: AsyncSession = Depends(get_db)
):
    """
    Record a new transaction.

    Negative amounts are expenses, positive amounts are income.
    The category is optional and defaults to "other" in insights.
    """
    repo = TransactionRepository(db)
    created = await repo.create(
        amount=transaction.amount,
        description=transaction.description,
        date=transaction.date,
        category=transaction.category,
    )
    event_bus.publish(TRANSACTIONS_CHANGED, {"action": "created", "id": created.id})
    return created


@router.get("", response_model=List[schemas.Transaction])
async def read_transactions(db: AsyncSession = Depends(get_db)):
    """Get all transactions, newest first."""
    repo = TransactionRepository(db)
    return await repo.list(order_by_date_descending=True)


@router.put("", response_model=schemas.Transaction)
async def update_transaction(
    transaction: schemas.TransactionUpdate,
    db: AsyncSession = Depends(get_db)
):
    """Replace amount, description, date and category of a transaction."""
    repo = TransactionRepository(db)
    updated = await repo.update(
        transaction_id=transaction.id,
        amount=transaction.amount,
        description=transaction.description,
        date=transaction.date,
        category=transaction.category,
    )
    event_bus.publish(TRANSACTIONS_CHANGED, {"action": "updated", "id": updated.id})
    return updated


@router.delete("", response_model=core_schemas.Message)
async def delete_transaction(
    transaction: schemas.TransactionDelete,
    db: AsyncSession = Depends(get_db)
):
    """Delete a transaction."""
    repo = TransactionRepository(db)
    await repo.delete(transaction.id)
    event_bus.publish(TRANSACTIONS_CHANGED, {"action": "deleted", "id": transaction.id})
    return {"message": "Transaction deleted successfully"}
