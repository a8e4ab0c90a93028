"""Insight endpoints feeding the dashboard cards and charts."""

from typing import List, Literal, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from components.budget.repository import BudgetRepository
from components.core import config
from components.core import schemas as core_schemas
from components.core.events import revision_tracker
from components.core.init_db import get_db
from components.core.validation import validate_month
from components.insights import engine, schemas, service
from components.transaction.repository import TransactionRepository

settings = config.get_settings()

router = APIRouter(
    prefix="/insights",
    tags=["insights"],
)

MONTH_QUERY = Query(None, description="Month in YYYY-MM format (defaults to the current month)")


def _resolve_month(month: Optional[str]) -> str:
    return validate_month(month) if month else engine.current_month()


@router.get("/summary", response_model=schemas.Summary)
async def get_summary(
    top: Optional[int] = Query(None, ge=1, description="Number of top categories to return"),
    db: AsyncSession = Depends(get_db)
):
    """
    Get all-time totals for the dashboard cards.

    Returns:
    - Total income
    - Total expenses
    - Net balance (income - expenses)
    - Top categories by combined absolute amount
    """
    transactions = await TransactionRepository(db).list()
    return service.build_summary(transactions, top or settings.TOP_CATEGORIES_LIMIT)


@router.get("/categories", response_model=List[schemas.CategorySlice])
async def get_category_breakdown(
    sign: Literal["expense", "income", "all"] = Query("all", description="Which amounts to include"),
    db: AsyncSession = Depends(get_db)
):
    """Get per-category totals for the pie chart."""
    transactions = await TransactionRepository(db).list()
    return service.build_category_breakdown(transactions, sign)


@router.get("/monthly", response_model=List[schemas.MonthlyTotal])
async def get_monthly_totals(db: AsyncSession = Depends(get_db)):
    """Get the net amount of every month that has transactions."""
    transactions = await TransactionRepository(db).list()
    return service.build_monthly_totals(transactions)


@router.get("/budget-comparison", response_model=List[schemas.BudgetComparisonRow])
async def get_budget_comparison(
    month: Optional[str] = MONTH_QUERY,
    db: AsyncSession = Depends(get_db)
):
    """Get budgeted vs actual spending per category for a month."""
    month = _resolve_month(month)
    budgets = await BudgetRepository(db).list_by_month(month)
    transactions = await TransactionRepository(db).list()
    return service.build_budget_comparison(budgets, transactions, month)


@router.get("/budget-progress", response_model=List[schemas.BudgetProgress])
async def get_budget_progress(
    month: Optional[str] = MONTH_QUERY,
    db: AsyncSession = Depends(get_db)
):
    """Get spending progress of every budget of a month."""
    month = _resolve_month(month)
    budgets = await BudgetRepository(db).list_by_month(month)
    transactions = await TransactionRepository(db).list()
    return service.build_budget_progress(budgets, transactions, month)


@router.get("/spending", response_model=schemas.SpendingInsights)
async def get_spending_insights(
    month: Optional[str] = MONTH_QUERY,
    db: AsyncSession = Depends(get_db)
):
    """
    Get month-over-month spending insights.

    Returns:
    - Change of total expenses vs the previous month, in percent
    - Category with the biggest increase and the biggest decrease
    - Category most over its budget
    - Biggest expense category and its share of the month
    """
    month = _resolve_month(month)
    budgets = await BudgetRepository(db).list_by_month(month)
    transactions = await TransactionRepository(db).list()
    return service.build_spending_insights(transactions, budgets, month)


@router.get("/revision", response_model=core_schemas.Revision)
async def get_revision():
    """Get mutation counters; a changed value means the views should refetch."""
    return revision_tracker.snapshot()
