"""Unit tests for the dashboard view model builders."""

import pytest

from components.insights import service
from helpers import make_budget, make_transaction


def test_build_summary_names_top_categories() -> None:
    transactions = [
        make_transaction(-300, "housing"),
        make_transaction(-40, "mystery"),
        make_transaction(1000, None),
    ]
    summary = service.build_summary(transactions, top_n=2)
    assert summary.income == 1000
    assert summary.expenses == 340
    assert summary.net == 660
    assert [(c.category, c.name) for c in summary.top_categories] == [
        ("other", "Other"),
        ("housing", "Housing"),
    ]


def test_category_breakdown_keeps_unknown_ids_as_names() -> None:
    slices = service.build_category_breakdown(
        [make_transaction(-12, "mystery"), make_transaction(-8, "dining")]
    )
    assert [(s.category, s.name, s.color, s.value) for s in slices] == [
        ("mystery", "mystery", "#6b7280", 12),
        ("dining", "Dining Out", "#ef4444", 8),
    ]


def test_budget_comparison_falls_back_to_other_for_unknown_ids() -> None:
    budgets = [make_budget("mystery", 20)]
    transactions = [
        make_transaction(-25, "mystery", on="2024-02-03"),
        make_transaction(-99, "mystery", on="2024-01-03"),
    ]
    rows = service.build_budget_comparison(budgets, transactions, "2024-02")
    assert len(rows) == 1
    assert rows[0].category == "mystery"
    assert rows[0].name == "Other"
    assert rows[0].actual == 25


def test_budget_progress() -> None:
    budgets = [make_budget("groceries", 100), make_budget("dining", 40, id=2), make_budget("housing", 0, id=3)]
    transactions = [
        make_transaction(-60, "groceries", on="2024-02-02"),
        make_transaction(-50, "dining", on="2024-02-04"),
        make_transaction(-500, "dining", on="2024-03-01"),
    ]
    progress = service.build_budget_progress(budgets, transactions, "2024-02")
    groceries, dining, housing = progress

    assert (groceries.spent, groceries.remaining) == (60, 40)
    assert groceries.percentage == pytest.approx(60)
    assert not groceries.is_over_budget
    assert dining.percentage == 100
    assert dining.remaining == -10
    assert dining.is_over_budget
    assert housing.percentage == 0


def test_spending_insights() -> None:
    transactions = [
        make_transaction(-100, "dining", on="2024-01-10"),
        make_transaction(-50, "groceries", on="2024-01-11"),
        make_transaction(-150, "dining", on="2024-02-10"),
        make_transaction(-30, "groceries", on="2024-02-11"),
        make_transaction(3000, None, on="2024-02-01"),
    ]
    budgets = [make_budget("dining", 100), make_budget("groceries", 50, id=2)]
    insights = service.build_spending_insights(transactions, budgets, "2024-02")

    assert insights.previous_month == "2024-01"
    assert insights.current_month_total == 180
    assert insights.last_month_total == 150
    assert insights.monthly_change == pytest.approx(20)
    assert (insights.top_increase.category, insights.top_increase.amount) == ("dining", 50)
    assert (insights.top_decrease.category, insights.top_decrease.amount) == ("groceries", 20)
    assert insights.most_over_budget.name == "Dining Out"
    assert insights.most_over_budget.percent_over == 50
    assert insights.biggest_expense.category == "dining"


def test_spending_insights_without_data() -> None:
    insights = service.build_spending_insights([], [], "2024-02")
    assert insights.monthly_change == 0
    assert insights.top_increase is None
    assert insights.top_decrease is None
    assert insights.most_over_budget is None
    assert insights.biggest_expense is None
