"""Pytest configuration and shared fixtures for debtplan tests.

Provides an isolated SQLite database per test, a session factory matching the
repository implementations, debt factories and float helpers.
"""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path

import pytest
from sqlmodel import Session, SQLModel, create_engine

from debtplan.infra.database import create_session_factory

# Import all models to ensure they're registered with SQLModel metadata
from debtplan.models import DebtRecord, PayoffStrategy  # noqa: F401
from debtplan.services.payoff import Debt

TEST_USER = "tester"

# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture(scope="function")
def db_engine():
    """Create an isolated SQLite database file for each test.

    Yields:
        Engine: SQLModel engine connected to the test database
    """
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    engine = create_engine(f"sqlite:///{db_path}", echo=False)
    SQLModel.metadata.create_all(engine)

    yield engine

    engine.dispose()
    db_path.unlink(missing_ok=True)


@pytest.fixture(scope="function")
def db_session(db_engine):
    """Create a database session for a single test."""
    session = Session(db_engine, expire_on_commit=False)
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


@pytest.fixture(scope="function")
def session_factory(db_engine):
    """The transactional session factory the application hands to repositories."""

    return create_session_factory(db_engine)


# =============================================================================
# Test Data Factories
# =============================================================================


@pytest.fixture
def debt_factory(db_session):
    """Factory for creating persisted debt records.

    Returns:
        Callable: Function that creates and persists DebtRecord instances
    """

    def _create_debt(
        name: str = "Test Debt",
        current_balance: float = 1000.00,
        interest_rate: float = 18.0,
        minimum_payment: float = 25.00,
        active: bool = True,
        user_id: str = TEST_USER,
    ) -> DebtRecord:
        debt = DebtRecord(
            user_id=user_id,
            name=name,
            current_balance=current_balance,
            interest_rate=interest_rate,
            minimum_payment=minimum_payment,
            active=active,
        )
        db_session.add(debt)
        db_session.commit()
        db_session.refresh(debt)
        return debt

    return _create_debt


@pytest.fixture
def sample_debts() -> list[Debt]:
    """Three debts whose minimum payments always exceed their monthly interest."""

    return [
        Debt(id=1, name="Visa", balance=1000.00, annual_rate_percent=18.0, minimum_payment=50.00),
        Debt(id=2, name="Car Loan", balance=2500.00, annual_rate_percent=7.0, minimum_payment=60.00),
        Debt(id=3, name="Store Card", balance=400.00, annual_rate_percent=24.0, minimum_payment=20.00),
    ]


# =============================================================================
# Assertion Helpers
# =============================================================================


def assert_float_equal(actual: float, expected: float, tolerance: float = 0.01):
    """Assert that two floats are equal within a tolerance (default one cent)."""

    assert abs(actual - expected) <= tolerance, (
        f"Expected {expected}, got {actual} (difference: {abs(actual - expected)})"
    )


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by setup_logging so they never outlive a test."""

    yield
    logger = logging.getLogger("debtplan")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
