"""Repository for budget operations."""

import logging
from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from components.budget.models import Budget
from components.budget import schemas
from components.core.database import store_errors
from components.core.exceptions import NotFoundError, ValidationError
from components.core.validation import require_fields, validate_month

logger = logging.getLogger(__name__)


class BudgetRepository:
    """Repository for budget operations."""

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session

    async def upsert(self, category: str, amount: float, month: str) -> schemas.Budget:
        """
        Create a budget for (category, month) or replace its amount.

        An existing record keeps its id; only the amount changes.
        """
        require_fields(category=category, amount=amount, month=month)
        if amount < 0:
            raise ValidationError("Budget amount must not be negative")
        validate_month(month)

        async with store_errors(self.session, "upsert budget"):
            result = await self.session.execute(
                select(Budget).where(Budget.category == category, Budget.month == month)
            )
            db_budget = result.scalar_one_or_none()

            if db_budget is None:
                db_budget = Budget(category=category, amount=float(amount), month=month)
                self.session.add(db_budget)
                action = "Created"
            else:
                db_budget.amount = float(amount)
                action = "Replaced"

            await self.session.commit()
            await self.session.refresh(db_budget)

        logger.info("%s budget %s for %s in %s", action, db_budget.id, category, month)
        return schemas.Budget.model_validate(db_budget)

    async def list_by_month(self, month: Optional[str] = None) -> List[schemas.Budget]:
        """Get budgets for one month, or all budgets when month is omitted."""
        query = select(Budget).order_by(Budget.id)
        if month:
            query = query.where(Budget.month == validate_month(month))

        async with store_errors(self.session, "list budgets"):
            result = await self.session.execute(query)
            budgets = result.scalars().all()

        return [schemas.Budget.model_validate(budget) for budget in budgets]

    async def delete(self, budget_id: int) -> None:
        """Delete budget by ID."""
        require_fields("Missing budget ID", id=budget_id)

        async with store_errors(self.session, "delete budget"):
            result = await self.session.execute(select(Budget).where(Budget.id == budget_id))
            db_budget = result.scalar_one_or_none()
            if db_budget is None:
                raise NotFoundError("Budget not found")

            await self.session.delete(db_budget)
            await self.session.commit()

        logger.info("Deleted budget %s", budget_id)
