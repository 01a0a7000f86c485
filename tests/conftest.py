"""Shared pytest fixtures for ledgercalc tests."""

import tempfile
import os
from datetime import date
from decimal import Decimal
from pathlib import Path
import pytest

from ledgercalc.database.factories import create_sqlite_database
from ledgercalc.domain.entities import DetailLine
from ledgercalc.domain.exchange_rate import ExchangeRateService
from ledgercalc.domain.settings import SettingsService
from ledgercalc.domain.tax import TaxRateService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def settings_service(temp_db):
    """Create a SettingsService with a temporary database."""
    return SettingsService(temp_db)


@pytest.fixture
def exchange_rate_service(temp_db):
    """Create an ExchangeRateService with a temporary database."""
    return ExchangeRateService(temp_db)


@pytest.fixture
def tax_rate_service(temp_db):
    """Create a TaxRateService with a temporary database."""
    return TaxRateService(temp_db)


@pytest.fixture
def sample_rates(exchange_rate_service):
    """Store exchange rates for currency 2: 3.75 from 2024-01-01, 3.80 from 2024-02-01."""
    exchange_rate_service.set_rate(2, Decimal("3.75"), date(2024, 1, 1))
    exchange_rate_service.set_rate(2, Decimal("3.80"), date(2024, 2, 1))
    exchange_rate_service.set_rate(2, Decimal("1.25"), date(2024, 1, 1), is_local=True)
    return exchange_rate_service


@pytest.fixture
def sample_lines():
    """Three detail lines with user inputs only."""
    return [
        DetailLine(item_no=1, quantity=Decimal("10"), unit_price=Decimal("5.00"), tax_percentage=Decimal("10")),
        DetailLine(item_no=2, quantity=Decimal("1"), unit_price=Decimal("100"), tax_percentage=Decimal("0")),
        DetailLine(item_no=3, quantity=Decimal("2"), unit_price=Decimal("50"), tax_percentage=Decimal("6")),
    ]


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"
