"""Pytest fixtures for testing"""

import pytest
from datetime import date
from fastapi.testclient import TestClient
from decision_gateway.api.main import create_app
from decision_gateway.api.dependencies import get_decision_engine
from decision_gateway.config import Settings
from decision_gateway.domain.engine import DecisionEngine
from decision_gateway.infrastructure.validators.personal_code import PersonalCodeValidator


# Fixed evaluation date so ages in the sample codes never drift
EVALUATION_DATE = date(2026, 10, 19)


class AcceptAllValidator:
    """Validator stub that lets any code through to the parser"""

    def is_valid(self, personal_code: str) -> bool:
        return True


@pytest.fixture
def today() -> date:
    return EVALUATION_DATE


@pytest.fixture
def config() -> Settings:
    """Default loan bounds, independent of any .env in the working directory"""
    return Settings(_env_file=None)


@pytest.fixture
def engine(config: Settings) -> DecisionEngine:
    """Decision engine with the real checksum validator and a fixed clock"""
    return DecisionEngine(PersonalCodeValidator(), config=config, clock=lambda: EVALUATION_DATE)


@pytest.fixture
def permissive_engine(config: Settings) -> DecisionEngine:
    """Decision engine that skips checksum validation"""
    return DecisionEngine(AcceptAllValidator(), config=config, clock=lambda: EVALUATION_DATE)


@pytest.fixture
def personal_codes() -> dict[str, str]:
    """
    Valid personal codes (checksum included) for common applicant profiles.

    Born 2001-01-01 unless noted; sub-segment is the last four digits.
    """
    return {
        "segment_1_latvia": "50101014509",  # sub-segment 4509
        "segment_2_lithuania": "50101016002",  # sub-segment 6002
        "segment_3_lithuania": "50101019004",  # sub-segment 9004
        "debt_estonia": "50101011006",  # sub-segment 1006
        "born_1930_estonia": "33001012505",  # age 96
        "born_2015_latvia": "51501014501",  # age 11
        "born_1946_estonia": "34601012503",  # age 80, cap 75
        "born_1946_latvia": "34601014508",  # age 80, cap 80
        "born_1946_lithuania": "34601019003",  # age 80, cap 85
    }


@pytest.fixture
def client(engine: DecisionEngine) -> TestClient:
    """Create FastAPI test client with a fixed-date decision engine"""
    app = create_app()
    app.dependency_overrides[get_decision_engine] = lambda: engine
    return TestClient(app)
