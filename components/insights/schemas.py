"""Pydantic schemas for derived insight view models."""

from typing import List, Optional
from pydantic import BaseModel


class IncomeExpenseNet(BaseModel):
    """Schema for income, expense and net totals."""
    income: float
    expenses: float
    net: float


class CategoryTotal(BaseModel):
    """Schema for a category with its total."""
    category: str
    total: float


class BudgetComparisonEntry(BaseModel):
    """Schema for budgeted vs actual spending of one category."""
    category: str
    budgeted: float
    actual: float


class CategoryDelta(BaseModel):
    """Schema for a month-over-month change of one category."""
    category: str
    amount: float


class CategoryDeltas(BaseModel):
    """Schema for the biggest increase and decrease between two months."""
    top_increase: Optional[CategoryDelta] = None
    top_decrease: Optional[CategoryDelta] = None


class OverBudget(BaseModel):
    """Schema for the category that exceeded its budget the most."""
    category: str
    over_amount: float
    percent_over: float


class BiggestExpense(BaseModel):
    """Schema for the category with the highest spending."""
    category: str
    amount: float
    percent_of_total: float


class MonthlyTotal(BaseModel):
    """Schema for the net amount of one calendar month."""
    month: str
    label: str
    total: float


# Dashboard view models

class NamedCategoryTotal(CategoryTotal):
    """Schema for a category total with display attributes."""
    name: str
    color: str


class Summary(IncomeExpenseNet):
    """Schema for the dashboard summary cards."""
    top_categories: List[NamedCategoryTotal]


class CategorySlice(BaseModel):
    """Schema for one pie chart slice."""
    category: str
    name: str
    color: str
    value: float


class BudgetComparisonRow(BudgetComparisonEntry):
    """Schema for one budget comparison chart bar group."""
    name: str
    color: str


class BudgetProgress(BaseModel):
    """Schema for progress of one budget within its month."""
    id: int
    category: str
    name: str
    color: str
    month: str
    budgeted: float
    spent: float
    remaining: float
    percentage: float
    is_over_budget: bool


class NamedCategoryDelta(CategoryDelta):
    name: str


class NamedOverBudget(OverBudget):
    name: str


class NamedBiggestExpense(BiggestExpense):
    name: str


class SpendingInsights(BaseModel):
    """Schema for the month-over-month spending insight cards."""
    month: str
    previous_month: str
    current_month_total: float
    last_month_total: float
    monthly_change: float
    top_increase: Optional[NamedCategoryDelta] = None
    top_decrease: Optional[NamedCategoryDelta] = None
    most_over_budget: Optional[NamedOverBudget] = None
    biggest_expense: Optional[NamedBiggestExpense] = None
