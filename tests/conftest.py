"""Pytest fixtures for testing"""

import pytest
from datetime import datetime, timezone
from typing import Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from truecost.api.main import create_app
from truecost.infrastructure.database.models import Base
from truecost.infrastructure.database.session import get_db
from truecost.domain.models import LoanScenario


@pytest.fixture
def db(tmp_path) -> Generator[Session, None, None]:
    """Create test database and session"""
    engine = create_engine(f"sqlite:///{tmp_path / 'test.db'}", connect_args={"check_same_thread": False})
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def client(db: Session) -> TestClient:
    """Create FastAPI test client with test database"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture
def car_loan() -> LoanScenario:
    return LoanScenario(
        id="car",
        name="Car",
        principal=25000.0,
        term_months=60,
        payment_frequency="MONTHLY",
        fixed_annual_rate=0.05,
        created_at=datetime(2025, 1, 1, tzinfo=timezone.utc),
    )


@pytest.fixture
def variable_loan() -> LoanScenario:
    return LoanScenario(
        id="heloc",
        name="HELOC",
        principal=40000.0,
        term_months=120,
        payment_frequency="BIWEEKLY",
        rate_source="MARKET_AI",
        spread_over_policy_rate=0.015,
    )
