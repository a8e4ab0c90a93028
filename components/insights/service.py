"""Dashboard view models built from a fetched transaction/budget snapshot."""

from typing import List, Optional, Sequence

from components.category.registry import get_category_by_id, resolve_category
from components.insights import engine
from components.insights import schemas


def build_summary(transactions: Sequence, top_n: int = 3) -> schemas.Summary:
    """All-time income/expense/net cards and the top categories."""
    totals = engine.income_expense_net(transactions)
    top = []
    for entry in engine.top_categories(transactions, top_n):
        category = get_category_by_id(entry.category)
        top.append(
            schemas.NamedCategoryTotal(
                category=entry.category,
                total=entry.total,
                name=category.name,
                color=category.color,
            )
        )
    return schemas.Summary(**totals.model_dump(), top_categories=top)


def build_category_breakdown(transactions: Sequence, sign: str = "all") -> List[schemas.CategorySlice]:
    """Pie chart slices; unknown categories keep their raw id as the name."""
    slices = []
    for category_id, value in engine.totals_by_category(transactions, sign).items():
        category = resolve_category(category_id)
        slices.append(
            schemas.CategorySlice(
                category=category_id,
                name=category.name,
                color=category.color,
                value=value,
            )
        )
    return slices


def build_monthly_totals(transactions: Sequence) -> List[schemas.MonthlyTotal]:
    return engine.monthly_totals(transactions)


def build_budget_comparison(
    budgets: Sequence,
    transactions: Sequence,
    month: str,
) -> List[schemas.BudgetComparisonRow]:
    """Budget vs actual rows for one month."""
    month_transactions = engine.filter_by_month(transactions, month)
    rows = []
    for entry in engine.budget_comparison(budgets, month_transactions):
        category = get_category_by_id(entry.category)
        rows.append(
            schemas.BudgetComparisonRow(
                **entry.model_dump(),
                name=category.name,
                color=category.color,
            )
        )
    return rows


def build_budget_progress(
    budgets: Sequence,
    transactions: Sequence,
    month: str,
) -> List[schemas.BudgetProgress]:
    """
    Progress of each budget against the month's expenses.

    The percentage is capped at 100 for display; ``remaining`` goes negative
    once a budget is exceeded.
    """
    spent_by_category = engine.totals_by_category(engine.filter_by_month(transactions, month), "expense")
    progress = []
    for budget in budgets:
        category = get_category_by_id(budget.category)
        spent = spent_by_category.get(budget.category, 0)
        percentage = min(100, spent / budget.amount * 100) if budget.amount > 0 else 0
        progress.append(
            schemas.BudgetProgress(
                id=budget.id,
                category=budget.category,
                name=category.name,
                color=category.color,
                month=budget.month,
                budgeted=budget.amount,
                spent=spent,
                remaining=budget.amount - spent,
                percentage=percentage,
                is_over_budget=spent > budget.amount,
            )
        )
    return progress


def build_spending_insights(
    transactions: Sequence,
    budgets: Sequence,
    month: Optional[str] = None,
) -> schemas.SpendingInsights:
    """Compare a month's expenses with the previous month and its budgets."""
    month = month or engine.current_month()
    last_month = engine.previous_month(month)

    current_transactions = engine.filter_by_month(transactions, month)
    last_transactions = engine.filter_by_month(transactions, last_month)

    current_total = engine.expense_total(current_transactions)
    last_total = engine.expense_total(last_transactions)
    current_by_category = engine.totals_by_category(current_transactions, "expense")
    last_by_category = engine.totals_by_category(last_transactions, "expense")

    deltas = engine.category_deltas(current_by_category, last_by_category)
    over_budget = engine.most_over_budget(budgets, current_by_category)
    biggest = engine.biggest_expense_category(current_by_category, current_total)

    return schemas.SpendingInsights(
        month=month,
        previous_month=last_month,
        current_month_total=current_total,
        last_month_total=last_total,
        monthly_change=engine.monthly_change_percent(current_total, last_total),
        top_increase=_named(schemas.NamedCategoryDelta, deltas.top_increase),
        top_decrease=_named(schemas.NamedCategoryDelta, deltas.top_decrease),
        most_over_budget=_named(schemas.NamedOverBudget, over_budget),
        biggest_expense=_named(schemas.NamedBiggestExpense, biggest),
    )


def _named(schema, insight):
    if insight is None:
        return None
    return schema(**insight.model_dump(), name=get_category_by_id(insight.category).name)
