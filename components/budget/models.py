"""Budget model for the database."""

from sqlalchemy import Column, Integer, String, DateTime, Numeric, UniqueConstraint, func

from components.core.database import Base


class Budget(Base):
    """Budget model storing a monthly spending ceiling per category."""
    __tablename__ = "budgets"
    __table_args__ = (
        UniqueConstraint("category", "month", name="uq_budgets_category_month"),
    )

    id = Column(Integer, primary_key=True, index=True)
    category = Column(String(50), nullable=False)
    amount = Column(Numeric(12, 2, asdecimal=False), nullable=False)
    month = Column(String(7), nullable=False, index=True)  # YYYY-MM
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=False, server_default=func.now(), onupdate=func.now())
