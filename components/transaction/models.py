"""Transaction model for the database."""

from sqlalchemy import Column, Integer, String, Date, DateTime, Numeric, func

from components.core.database import Base


class Transaction(Base):
    """Transaction model; negative amounts are expenses, positive are income."""
    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True, index=True)
    amount = Column(Numeric(12, 2, asdecimal=False), nullable=False)
    description = Column(String(255), nullable=False)
    date = Column(Date, nullable=False, index=True)
    category = Column(String(50), nullable=True)  # Registry id, not enforced
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=False, server_default=func.now(), onupdate=func.now())
