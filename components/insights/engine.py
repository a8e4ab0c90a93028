"""
Aggregations over transaction and budget snapshots.

Every function here is pure: inputs are read, never mutated, and nothing is
fetched from the database. Transactions are any objects exposing ``amount``,
``category`` and ``date``; budgets expose ``category`` and ``amount``. A
missing category is counted as "other". Divisions by zero are guarded and
yield 0 instead of raising.
"""

import calendar
from datetime import date, datetime
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

import pandas as pd

from components.insights import schemas

DEFAULT_CATEGORY = "other"
SIGNS = ("expense", "income", "all")


def category_of(transaction) -> str:
    return transaction.category or DEFAULT_CATEGORY


def month_of(value: date) -> str:
    """Month token (YYYY-MM) of a date."""
    # strftime("%Y") does not zero-pad years before 1000 on every platform
    return f"{value.year:04d}-{value.month:02d}"


def month_label(month: str) -> str:
    """Short display label ("Jan 2024") of a month token."""
    year, month_number = month.split("-")
    return f"{calendar.month_abbr[int(month_number)]} {year}"


def current_month() -> str:
    return month_of(datetime.now())


def previous_month(month: str) -> str:
    year, month_number = (int(part) for part in month.split("-"))
    if month_number == 1:
        return f"{year - 1:04d}-12"
    return f"{year:04d}-{month_number - 1:02d}"


def filter_by_month(transactions: Iterable, month: str) -> list:
    """Transactions whose date falls within the given month."""
    return [tx for tx in transactions if month_of(tx.date) == month]


def _matches_sign(amount: float, sign: str) -> bool:
    if sign == "expense":
        return amount < 0
    if sign == "income":
        return amount > 0
    return True


def totals_by_category(transactions: Iterable, sign: str = "expense") -> Dict[str, float]:
    """
    Sum absolute amounts per category for transactions matching ``sign``.

    ``sign`` is "expense" (amount < 0), "income" (amount > 0) or "all".
    Keys keep first-encountered order; categories totalling zero are left out.
    """
    if sign not in SIGNS:
        raise ValueError(f"Unknown sign filter: {sign}")

    totals: Dict[str, float] = {}
    for tx in transactions:
        if not _matches_sign(tx.amount, sign):
            continue
        category = category_of(tx)
        totals[category] = totals.get(category, 0) + abs(tx.amount)

    return {category: total for category, total in totals.items() if total != 0}


def expense_total(transactions: Iterable) -> float:
    """Sum of absolute values of all negative amounts."""
    return sum(abs(tx.amount) for tx in transactions if tx.amount < 0)


def income_expense_net(transactions: Iterable) -> schemas.IncomeExpenseNet:
    transactions = list(transactions)
    income = sum(tx.amount for tx in transactions if tx.amount > 0)
    expenses = expense_total(transactions)
    return schemas.IncomeExpenseNet(income=income, expenses=expenses, net=income - expenses)


def top_categories(transactions: Iterable, n: int) -> List[schemas.CategoryTotal]:
    """Categories with the largest combined absolute totals, largest first."""
    totals = totals_by_category(transactions, "all")
    # sorted() is stable, so ties keep first-encountered order
    ranked = sorted(totals.items(), key=lambda item: -item[1])
    return [schemas.CategoryTotal(category=category, total=total) for category, total in ranked[:max(n, 0)]]


def budget_comparison(budgets: Sequence, transactions: Iterable) -> List[schemas.BudgetComparisonEntry]:
    """
    Budgeted vs actual spending.

    Budgets come first in input order, followed by categories that have
    expenses but no budget (budgeted = 0) in first-encountered order.
    """
    actual = totals_by_category(transactions, "expense")
    entries = [
        schemas.BudgetComparisonEntry(
            category=budget.category,
            budgeted=budget.amount,
            actual=actual.get(budget.category, 0),
        )
        for budget in budgets
    ]

    budgeted_categories = {budget.category for budget in budgets}
    for category, amount in actual.items():
        if category not in budgeted_categories:
            entries.append(schemas.BudgetComparisonEntry(category=category, budgeted=0, actual=amount))
    return entries


def monthly_change_percent(current_month_total: float, last_month_total: float) -> float:
    if last_month_total == 0:
        return 0
    return (current_month_total - last_month_total) / last_month_total * 100


def category_deltas(
    current_by_category: Mapping[str, float],
    last_by_category: Mapping[str, float],
) -> schemas.CategoryDeltas:
    """
    Biggest month-over-month increase and decrease.

    An increase needs spending last month; a decrease needs spending this
    month. The decrease is reported as a positive amount.
    """
    categories = list(current_by_category)
    categories += [category for category in last_by_category if category not in current_by_category]

    top_increase: Optional[schemas.CategoryDelta] = None
    top_decrease: Optional[schemas.CategoryDelta] = None
    max_increase = float("-inf")
    max_decrease = float("inf")

    for category in categories:
        current = current_by_category.get(category, 0)
        last = last_by_category.get(category, 0)
        change = current - last

        if last > 0 and change > max_increase:
            max_increase = change
            top_increase = schemas.CategoryDelta(category=category, amount=change)

        if current > 0 and change < max_decrease:
            max_decrease = change
            top_decrease = schemas.CategoryDelta(category=category, amount=abs(change))

    return schemas.CategoryDeltas(top_increase=top_increase, top_decrease=top_decrease)


def most_over_budget(
    budgets: Iterable,
    actual_by_category: Mapping[str, float],
) -> Optional[schemas.OverBudget]:
    """The exceeded budget with the highest overspend percentage, if any."""
    worst: Optional[schemas.OverBudget] = None
    for budget in budgets:
        over_amount = actual_by_category.get(budget.category, 0) - budget.amount
        if over_amount <= 0:
            continue
        percent_over = over_amount / budget.amount * 100 if budget.amount > 0 else 0
        if worst is None or percent_over > worst.percent_over:
            worst = schemas.OverBudget(
                category=budget.category,
                over_amount=over_amount,
                percent_over=percent_over,
            )
    return worst


def biggest_expense_category(
    current_by_category: Mapping[str, float],
    month_total: float,
) -> Optional[schemas.BiggestExpense]:
    biggest: Optional[schemas.BiggestExpense] = None
    for category, amount in current_by_category.items():
        if amount <= 0 or (biggest is not None and amount <= biggest.amount):
            continue
        biggest = schemas.BiggestExpense(
            category=category,
            amount=amount,
            percent_of_total=amount / month_total * 100 if month_total else 0,
        )
    return biggest


def monthly_totals(transactions: Iterable) -> List[schemas.MonthlyTotal]:
    """Net signed amount per calendar month in chronological order."""
    transactions = list(transactions)
    if not transactions:
        return []

    frame = pd.DataFrame(
        {
            "month": [month_of(tx.date) for tx in transactions],
            "amount": [tx.amount for tx in transactions],
        }
    )
    # Zero-padded tokens sort chronologically
    grouped = frame.groupby("month", sort=True)["amount"].sum()
    return [
        schemas.MonthlyTotal(month=month, label=month_label(month), total=float(total))
        for month, total in grouped.items()
    ]
