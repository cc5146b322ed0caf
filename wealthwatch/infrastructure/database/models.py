"""SQLAlchemy ORM models for the finance record store"""

import uuid
from sqlalchemy import Column, String, Boolean, Float, DateTime, Date, Text, JSON
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


def new_id() -> str:
    return str(uuid.uuid4())


class TransactionRecord(Base):
    """Income or expense entry"""

    __tablename__ = "transactions"

    id = Column(String(36), primary_key=True, default=new_id)
    amount = Column(Float, nullable=False)
    type = Column(String(16), nullable=False, index=True)
    category = Column(Text, nullable=False, index=True)
    subcategory = Column(Text, nullable=True)
    date = Column(Date, nullable=False, index=True)
    description = Column(Text, nullable=False, default="")
    tags = Column(JSON, nullable=True)
    recurring = Column(Boolean, nullable=False, default=False)
    recurring_interval = Column(String(16), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())


class DebtRecord(Base):
    """Outstanding or settled debt"""

    __tablename__ = "debts"

    id = Column(String(36), primary_key=True, default=new_id)
    lender_name = Column(Text, nullable=False)
    amount = Column(Float, nullable=False)
    current_balance = Column(Float, nullable=True)
    due_date = Column(Date, nullable=False)
    interest_rate = Column(Float, nullable=True)
    minimum_payment = Column(Float, nullable=True)
    description = Column(Text, nullable=False, default="")
    status = Column(String(16), nullable=False, default="active", index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())


class BudgetRecord(Base):
    """Category spending limit"""

    __tablename__ = "budgets"

    id = Column(String(36), primary_key=True, default=new_id)
    category = Column(Text, nullable=False, index=True)
    limit = Column(Float, nullable=False)
    spent = Column(Float, nullable=False, default=0.0)
    period = Column(String(16), nullable=False, default="monthly")
    alert_threshold = Column(Float, nullable=True)
    color = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())


class GoalRecord(Base):
    """Savings goal"""

    __tablename__ = "goals"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(Text, nullable=False)
    target_amount = Column(Float, nullable=False)
    current_amount = Column(Float, nullable=False, default=0.0)
    target_date = Column(Date, nullable=False)
    category = Column(String(16), nullable=False)
    description = Column(Text, nullable=True)
    priority = Column(String(16), nullable=False)
    status = Column(String(16), nullable=False, default="active")
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())


class SettingRecord(Base):
    """User preference stored as a key/value pair"""

    __tablename__ = "settings"

    key = Column(String(64), primary_key=True)
    value = Column(JSON, nullable=True)
