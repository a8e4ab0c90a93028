"""Script to import transactions and budgets from tab-separated CSV files."""

import argparse
import asyncio
from pathlib import Path

import pandas as pd

from components.core.exceptions import ValidationError
from components.core.init_db import db_manager, get_db
from components.budget.repository import BudgetRepository
from components.transaction.repository import TransactionRepository


def _optional(value):
    return None if pd.isna(value) else value


async def import_data(data_dir: Path):
    """
    Import transactions.csv and budgets.csv from ``data_dir``.

    transactions.csv columns: amount, description, date (YYYY-MM-DD), category
    budgets.csv columns: category, amount, month (YYYY-MM)

    Rows failing validation are reported and skipped.
    """
    await db_manager.create_tables()

    async for db in get_db():
        transactions = TransactionRepository(db)
        budgets = BudgetRepository(db)

        transactions_file = data_dir / "transactions.csv"
        if transactions_file.exists():
            print("Importing transactions...")
            frame = pd.read_csv(transactions_file, sep="\t", dtype={"category": "string"})
            for row_num, row in enumerate(frame.itertuples(index=False), start=2):
                try:
                    parsed_date = pd.to_datetime(row.date, errors="coerce")
                    await transactions.create(
                        amount=_optional(row.amount),
                        description=_optional(row.description),
                        date=None if pd.isna(parsed_date) else parsed_date.date(),
                        category=_optional(getattr(row, "category", None)),
                    )
                except ValidationError as e:
                    print(f"  Row {row_num}: {e.message}")

        budgets_file = data_dir / "budgets.csv"
        if budgets_file.exists():
            print("Importing budgets...")
            frame = pd.read_csv(budgets_file, sep="\t", dtype={"month": "string"})
            for row_num, row in enumerate(frame.itertuples(index=False), start=2):
                try:
                    await budgets.upsert(
                        category=_optional(row.category),
                        amount=_optional(row.amount),
                        month=_optional(row.month),
                    )
                except ValidationError as e:
                    print(f"  Row {row_num}: {e.message}")

        print("Import finished")
        break  # Only need one session

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("data_dir", type=Path, nargs="?", default=Path("data"))
    asyncio.run(import_data(parser.parse_args().data_dir))
