"""Pytest fixtures for testing"""

import pytest
from dataclasses import replace
from typing import Any, Callable, Dict, Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from fico_projector.api.main import create_app
from fico_projector.infrastructure.database.models import Base
from fico_projector.infrastructure.database.session import get_db
from fico_projector.domain.models import ProfileInput, ScenarioType


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
def pre_enrollment_profile() -> ProfileInput:
    """Mid-tier consumer about to enroll $20k of card debt"""
    return ProfileInput(
        fico_score=650,
        total_debt=20000,
        monthly_income=4000,
        utilization_percent=70,
        accounts_enrolling=3,
        positive_accounts=1,
        oldest_account_age_years=8,
        total_credit_limit=30000,
        scenario_type=ScenarioType.PRE_ENROLLMENT,
        program_timeline_months=36,
        secured_card=True,
        credit_builder=True,
        authorized_user=False,
    )


@pytest.fixture
def progress_tracker_profile(pre_enrollment_profile: ProfileInput) -> ProfileInput:
    """Same consumer, 12 months into a 36-month program"""
    return replace(
        pre_enrollment_profile,
        scenario_type=ScenarioType.PROGRESS_TRACKER,
        months_in_program=12,
    )


@pytest.fixture
def make_profile(pre_enrollment_profile: ProfileInput) -> Callable[..., ProfileInput]:
    """Factory for profiles that differ from the pre-enrollment profile"""

    def _make(**overrides: Any) -> ProfileInput:
        return replace(pre_enrollment_profile, **overrides)

    return _make


@pytest.fixture
def simulation_payload() -> Dict[str, Any]:
    """Request body matching the pre-enrollment profile"""
    return {
        "fico_score": 650,
        "total_debt": 20000,
        "accounts_enrolling": 3,
        "monthly_income": 4000,
        "utilization_percent": 70,
        "positive_accounts": 1,
        "oldest_account_age_years": 8,
        "total_credit_limit": 30000,
        "scenario_type": "pre-enrollment",
        "program_timeline_months": 36,
        "secured_card": True,
        "credit_builder": True,
        "authorized_user": False,
    }
