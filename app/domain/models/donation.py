"""Donation — one row per payment confirmed by the provider."""

from sqlalchemy import Column, Integer, String, Text, Boolean, Numeric, DateTime, CheckConstraint
from sqlalchemy.sql import func

from app.infrastructure.database import Base


class Donation(Base):
    __tablename__ = "donations"
    __table_args__ = (CheckConstraint("amount > 0", name="ck_donations_amount_positive"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    amount = Column(Numeric(12, 2), nullable=False)  # major currency units
    currency = Column(String(10), nullable=False, default="INR")
    name = Column(String(200), nullable=True)
    email = Column(String(255), nullable=True)
    message = Column(Text, nullable=True)
    is_recurring = Column(Boolean, nullable=False, default=False)
    purpose = Column(String(100), nullable=True)
    payment_id = Column(String(100), unique=True, nullable=False, index=True)
    order_id = Column(String(100), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<Donation {self.payment_id} - {self.amount} {self.currency}>"
