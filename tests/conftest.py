"""Shared pytest fixtures for farmstats tests."""

import tempfile
import os
from datetime import date, datetime, UTC
from decimal import Decimal
import pytest

from farmstats.database.factories import create_sqlite_database
from farmstats.domain.analytics import AnalyticsService
from farmstats.domain.entities import (
    EggCollectionEvent,
    Flock,
    Transaction,
    TransactionKind,
)
from farmstats.domain.records import RecordService

FARM_ID = "green-acres"


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def farm_id():
    return FARM_ID


@pytest.fixture
def record_service(temp_db):
    """Create a RecordService with a temporary database."""
    return RecordService(temp_db)


@pytest.fixture
def analytics_service(temp_db):
    """Create an AnalyticsService with a temporary database."""
    return AnalyticsService(temp_db)


@pytest.fixture
def sample_records(record_service, farm_id):
    """Populate the database with a small year of farm records."""
    record_service.create_transaction(
        farm_id, TransactionKind.INCOME, Decimal("100000"), date(2025, 1, 5), category="Egg sales"
    )
    record_service.create_transaction(
        farm_id, TransactionKind.EXPENSE, Decimal("40000"), date(2025, 1, 10), category="Feed"
    )
    record_service.create_transaction(
        farm_id, TransactionKind.INCOME, Decimal("50000"), date(2025, 2, 1), category="Egg sales"
    )
    record_service.record_egg_collection(farm_id, date(2025, 1, 5), 120, 150, house="A")
    record_service.record_egg_collection(farm_id, date(2025, 1, 5), 80, 100, house="B")
    record_service.record_egg_collection(farm_id, date(2025, 2, 1), 100, 150, house="A")
    record_service.create_flock(farm_id, "Layers A", 80, 70, 90)
    record_service.create_flock(farm_id, "Layers B", 90, 90, 90)
    record_service.create_flock(farm_id, "Broilers", 60, 60, 60)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


def make_transaction(
    kind: TransactionKind,
    amount: str,
    occurred_on: date,
    currency: str = "UGX",
    txn_id: int = 1,
) -> Transaction:
    """Build a Transaction entity without a database."""
    return Transaction(
        id=txn_id,
        farm_id=FARM_ID,
        kind=kind,
        category="General",
        amount=Decimal(amount),
        currency=currency,
        occurred_on=occurred_on,
        created_at=datetime.now(UTC),
    )


def make_event(day: date, eggs: int, hens: int = 100, event_id: int = 1) -> EggCollectionEvent:
    """Build an EggCollectionEvent entity without a database."""
    return EggCollectionEvent(
        id=event_id,
        farm_id=FARM_ID,
        date=day,
        eggs_collected=eggs,
        hen_count=hens,
        created_at=datetime.now(UTC),
    )


def make_flock(name: str, health: float, productivity: float, feed_efficiency: float) -> Flock:
    """Build a Flock entity without a database."""
    return Flock(
        id=0,
        farm_id=FARM_ID,
        name=name,
        health_score=health,
        productivity_score=productivity,
        feed_efficiency_score=feed_efficiency,
    )
