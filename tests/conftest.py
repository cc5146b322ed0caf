"""Pytest fixtures for testing"""

import pytest
from datetime import date
from typing import Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from wealthwatch.api.main import create_app
from wealthwatch.api.dependencies import get_today
from wealthwatch.infrastructure.database.models import Base
from wealthwatch.infrastructure.database.session import get_db
from wealthwatch.domain.models import Debt, Transaction


# Fixed reference date so reporting windows are deterministic
TODAY = date(2024, 6, 15)

# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session) -> TestClient:
    """Create FastAPI test client with test database and a pinned date"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_today] = lambda: TODAY
    return TestClient(app)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def sample_transactions() -> list[Transaction]:
    """Six months (Jan-Jun 2024) of salary and rent"""
    transactions = []

    for month in range(1, 7):
        transactions.append(
            Transaction(
                id=f"salary_{month}",
                amount=4000,
                type="income",
                category="Salary",
                date=date(2024, month, 1),
                description="Monthly salary",
            )
        )
        transactions.append(
            Transaction(
                id=f"rent_{month}",
                amount=2000,
                type="expense",
                category="Housing",
                subcategory="Rent",
                date=date(2024, month, 3),
                description="Rent",
            )
        )

    return transactions


@pytest.fixture
def sample_debt() -> Debt:
    return Debt(
        id="loan_1",
        lender_name="Credit Union",
        amount=6000,
        due_date=date(2025, 1, 1),
        description="Car loan",
    )
