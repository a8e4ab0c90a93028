"""Script to seed demo transactions and budgets into the database."""

import asyncio
from datetime import date

from sqlalchemy import text

from components.core.init_db import db_manager, get_db
from components.budget.repository import BudgetRepository
from components.insights.engine import month_of, previous_month
from components.transaction.repository import TransactionRepository


async def seed_data():
    """Seed demo data for the current and previous month."""
    await db_manager.create_tables()
    this_month = month_of(date.today())
    last_month = previous_month(this_month)

    async for db in get_db():
        # Clear existing data
        await db.execute(text("DELETE FROM transactions"))
        await db.execute(text("DELETE FROM budgets"))
        await db.commit()

        transactions = TransactionRepository(db)
        budgets = BudgetRepository(db)

        for month in (last_month, this_month):
            year, month_number = (int(part) for part in month.split("-"))
            await transactions.create(3200.00, "Salary", date(year, month_number, 1))
            await transactions.create(-1200.00, "Rent", date(year, month_number, 2), "housing")
            await transactions.create(-86.40, "Weekly groceries", date(year, month_number, 5), "groceries")
            await transactions.create(-45.10, "Electricity bill", date(year, month_number, 9), "utilities")
            await transactions.create(-32.00, "Cinema", date(year, month_number, 12), "entertainment")

        year, month_number = (int(part) for part in this_month.split("-"))
        await transactions.create(-140.00, "Dinner with friends", date(year, month_number, 7), "dining")
        await transactions.create(-64.25, "Train tickets", date(year, month_number, 8), "transportation")

        await budgets.upsert("groceries", 300.00, this_month)
        await budgets.upsert("dining", 100.00, this_month)
        await budgets.upsert("entertainment", 50.00, this_month)
        await budgets.upsert("housing", 1200.00, this_month)
        break  # Only need one session

if __name__ == "__main__":
    asyncio.run(seed_data())
