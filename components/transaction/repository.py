"""Repository for transaction operations."""

import logging
from datetime import date
from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from components.core.database import store_errors
from components.core.exceptions import NotFoundError
from components.core.validation import require_fields
from components.transaction.models import Transaction
from components.transaction import schemas

logger = logging.getLogger(__name__)


class TransactionRepository:
    """Repository for transaction operations."""

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session

    async def create(
        self,
        amount: float,
        description: str,
        date: date,
        category: Optional[str] = None,
    ) -> schemas.Transaction:
        """Create a new transaction."""
        require_fields(amount=amount, description=description, date=date)

        async with store_errors(self.session, "create transaction"):
            db_transaction = Transaction(
                amount=float(amount),
                description=description,
                date=date,
                category=category,
            )
            self.session.add(db_transaction)
            await self.session.commit()
            await self.session.refresh(db_transaction)

        logger.info("Created transaction %s", db_transaction.id)
        return schemas.Transaction.model_validate(db_transaction)

    async def list(self, order_by_date_descending: bool = True) -> List[schemas.Transaction]:
        """Get all transactions ordered by date."""
        if order_by_date_descending:
            ordering = (Transaction.date.desc(), Transaction.id.desc())
        else:
            ordering = (Transaction.date.asc(), Transaction.id.asc())

        async with store_errors(self.session, "list transactions"):
            result = await self.session.execute(select(Transaction).order_by(*ordering))
            transactions = result.scalars().all()

        return [schemas.Transaction.model_validate(tx) for tx in transactions]

    async def get(self, transaction_id: int) -> schemas.Transaction:
        """Get transaction by ID."""
        db_transaction = await self._get_by_id(transaction_id)
        return schemas.Transaction.model_validate(db_transaction)

    async def update(
        self,
        transaction_id: int,
        amount: float,
        description: str,
        date: date,
        category: Optional[str] = None,
    ) -> schemas.Transaction:
        """Replace amount, description, date and category of a transaction."""
        require_fields(
            id=transaction_id, amount=amount, description=description, date=date
        )
        db_transaction = await self._get_by_id(transaction_id)

        async with store_errors(self.session, "update transaction"):
            db_transaction.amount = float(amount)
            db_transaction.description = description
            db_transaction.date = date
            db_transaction.category = category
            await self.session.commit()
            await self.session.refresh(db_transaction)

        logger.info("Updated transaction %s", transaction_id)
        return schemas.Transaction.model_validate(db_transaction)

    async def delete(self, transaction_id: int) -> None:
        """Delete transaction by ID."""
        require_fields("Missing transaction ID", id=transaction_id)
        db_transaction = await self._get_by_id(transaction_id)

        async with store_errors(self.session, "delete transaction"):
            await self.session.delete(db_transaction)
            await self.session.commit()

        logger.info("Deleted transaction %s", transaction_id)

    async def _get_by_id(self, transaction_id: int) -> Transaction:
        async with store_errors(self.session, "load transaction"):
            result = await self.session.execute(
                select(Transaction).where(Transaction.id == transaction_id)
            )
            db_transaction = result.scalar_one_or_none()

        if db_transaction is None:
            raise NotFoundError("Transaction not found")
        return db_transaction
