"""Unit tests for components.insights.engine."""

from datetime import date

import pytest

from components.insights import engine
from helpers import make_budget, make_transaction


@pytest.fixture
def scenario():
    transactions = [
        make_transaction(-50, "dining", on="2024-01-05"),
        make_transaction(-30, "dining", on="2024-02-10"),
        make_transaction(2000, None, on="2024-02-01"),
    ]
    budgets = [make_budget("dining", 40, month="2024-02")]
    return transactions, budgets


def test_scenario_for_february(scenario) -> None:
    transactions, budgets = scenario
    february = engine.filter_by_month(transactions, "2024-02")

    expenses = engine.totals_by_category(february, "expense")
    assert expenses == {"dining": 30}

    totals = engine.income_expense_net(february)
    assert (totals.income, totals.expenses, totals.net) == (2000, 30, 1970)

    assert engine.most_over_budget(budgets, expenses) is None


def test_totals_by_category_sign_filters() -> None:
    transactions = [
        make_transaction(-10, "groceries"),
        make_transaction(25, "groceries"),
        make_transaction(-5, None),
        make_transaction(100, "salary"),
    ]
    assert engine.totals_by_category(transactions, "expense") == {"groceries": 10, "other": 5}
    assert engine.totals_by_category(transactions, "income") == {"groceries": 25, "salary": 100}
    assert engine.totals_by_category(transactions, "all") == {"groceries": 35, "other": 5, "salary": 100}


def test_totals_by_category_omits_zero_totals() -> None:
    transactions = [make_transaction(0, "gifts"), make_transaction(-3, "dining")]
    totals = engine.totals_by_category(transactions, "all")
    assert "gifts" not in totals
    assert 0 not in totals.values()


def test_totals_by_category_treats_empty_category_as_other() -> None:
    assert engine.totals_by_category([make_transaction(-7, "")], "expense") == {"other": 7}


def test_income_expense_net_ignores_zero_amounts() -> None:
    totals = engine.income_expense_net(
        [make_transaction(0), make_transaction(-12.5), make_transaction(40)]
    )
    assert totals.income == 40
    assert totals.expenses == 12.5
    assert totals.net == totals.income - totals.expenses


def test_income_expense_net_empty() -> None:
    totals = engine.income_expense_net([])
    assert (totals.income, totals.expenses, totals.net) == (0, 0, 0)


def test_top_categories_sorted_and_truncated() -> None:
    transactions = [
        make_transaction(-20, "dining"),
        make_transaction(-50, "housing"),
        make_transaction(30, "dining"),
        make_transaction(-10, "shopping"),
        make_transaction(0, "gifts"),
    ]
    top = engine.top_categories(transactions, 2)
    assert [entry.category for entry in top] == ["dining", "housing"]
    assert [entry.total for entry in top] == [50, 50]

    everything = engine.top_categories(transactions, 10)
    assert len(everything) == 3
    totals = [entry.total for entry in everything]
    assert totals == sorted(totals, reverse=True)


def test_top_categories_ties_keep_input_order() -> None:
    transactions = [
        make_transaction(-5, "shopping"),
        make_transaction(-5, "dining"),
        make_transaction(-9, "housing"),
    ]
    assert [entry.category for entry in engine.top_categories(transactions, 3)] == [
        "housing",
        "shopping",
        "dining",
    ]


def test_budget_comparison_orders_budgets_then_unbudgeted() -> None:
    budgets = [make_budget("groceries", 200), make_budget("dining", 50, id=2)]
    transactions = [
        make_transaction(-30, "transportation"),
        make_transaction(-80, "groceries"),
        make_transaction(-15, None),
        make_transaction(500, "salary"),
    ]
    entries = engine.budget_comparison(budgets, transactions)
    assert [(e.category, e.budgeted, e.actual) for e in entries] == [
        ("groceries", 200, 80),
        ("dining", 50, 0),
        ("transportation", 0, 30),
        ("other", 0, 15),
    ]


@pytest.mark.parametrize(
    "current, last, expected",
    [(0, 0, 0), (150, 100, 50), (50, 100, -50), (80, 0, 0)],
)
def test_monthly_change_percent(current, last, expected) -> None:
    assert engine.monthly_change_percent(current, last) == expected


def test_category_deltas() -> None:
    current = {"dining": 120, "groceries": 40, "travel": 500}
    last = {"dining": 100, "groceries": 90, "housing": 1000}
    deltas = engine.category_deltas(current, last)

    # travel is new and housing dropped to zero: neither is eligible
    assert deltas.top_increase.category == "dining"
    assert deltas.top_increase.amount == 20
    assert deltas.top_decrease.category == "groceries"
    assert deltas.top_decrease.amount == 50


def test_category_deltas_absent_without_eligible_categories() -> None:
    deltas = engine.category_deltas({"travel": 10}, {"housing": 10})
    assert deltas.top_increase is None
    assert deltas.top_decrease is None


def test_category_deltas_ties_first_encountered() -> None:
    deltas = engine.category_deltas({"a": 20, "b": 20}, {"a": 10, "b": 10})
    assert deltas.top_increase.category == "a"
    assert deltas.top_decrease.category == "a"


def test_most_over_budget_picks_highest_percentage() -> None:
    budgets = [make_budget("groceries", 100), make_budget("dining", 40, id=2)]
    worst = engine.most_over_budget(budgets, {"groceries": 150, "dining": 80})
    assert worst.category == "dining"
    assert worst.over_amount == 40
    assert worst.percent_over == 100


def test_most_over_budget_absent_when_within_budget() -> None:
    budgets = [make_budget("groceries", 100)]
    assert engine.most_over_budget(budgets, {"groceries": 80}) is None
    assert engine.most_over_budget(budgets, {"groceries": 100}) is None


def test_most_over_budget_zero_budget_is_guarded() -> None:
    worst = engine.most_over_budget([make_budget("dining", 0)], {"dining": 25})
    assert worst.over_amount == 25
    assert worst.percent_over == 0


def test_biggest_expense_category() -> None:
    biggest = engine.biggest_expense_category({"dining": 30, "housing": 90}, 120)
    assert biggest.category == "housing"
    assert biggest.amount == 90
    assert biggest.percent_of_total == 75


def test_biggest_expense_category_guards() -> None:
    assert engine.biggest_expense_category({}, 0) is None
    assert engine.biggest_expense_category({"dining": 10}, 0).percent_of_total == 0


def test_month_helpers() -> None:
    assert engine.month_of(date(2024, 3, 31)) == "2024-03"
    assert engine.previous_month("2024-03") == "2024-02"
    assert engine.previous_month("2024-01") == "2023-12"
    assert len(engine.current_month()) == 7


def test_monthly_totals_chronological() -> None:
    transactions = [
        make_transaction(-40, on="2024-03-02"),
        make_transaction(100, on="2024-01-15"),
        make_transaction(-25, on="2024-01-20"),
    ]
    totals = engine.monthly_totals(transactions)
    assert [(t.month, t.label, t.total) for t in totals] == [
        ("2024-01", "Jan 2024", 75),
        ("2024-03", "Mar 2024", -40),
    ]
    assert engine.monthly_totals([]) == []


def test_month_tokens_are_zero_padded_for_early_years() -> None:
    assert engine.month_of(date(1, 1, 1)) == "0001-01"
    assert engine.month_of(date(999, 11, 30)) == "0999-11"

    totals = engine.monthly_totals(
        [make_transaction(-5, on="0001-01-15"), make_transaction(-7, on="2024-02-01")]
    )
    assert [(t.month, t.label, t.total) for t in totals] == [
        ("0001-01", "Jan 0001", -5),
        ("2024-02", "Feb 2024", -7),
    ]
    assert engine.filter_by_month([make_transaction(-5, on="0001-01-15")], "0001-01")


def test_inputs_are_not_mutated(scenario) -> None:
    transactions, budgets = scenario
    before = [vars(tx).copy() for tx in transactions]
    engine.top_categories(transactions, 3)
    engine.budget_comparison(budgets, transactions)
    assert [vars(tx) for tx in transactions] == before
    assert transactions[2].category is None
