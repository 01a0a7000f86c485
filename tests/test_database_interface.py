"""Tests for Database interface returning domain models."""

import pytest
from datetime import date
from decimal import Decimal

from ledgercalc.database.factories import create_sqlite_database
from ledgercalc.domain import entities


class TestDatabaseInterface:
    """Tests to verify Database interface returns domain models."""

    def test_settings_missing_until_saved(self, temp_db):
        """Test settings are None until first saved."""
        assert temp_db.get_settings() is None

        temp_db.save_settings(
            entities.CompanySettings(
                precision=entities.DecimalPrecision(amt_dec=3, loc_amt_dec=1),
                has_country_currency=True,
            )
        )

        settings = temp_db.get_settings()
        assert isinstance(settings, entities.CompanySettings)
        assert settings.precision.amt_dec == 3
        assert settings.precision.loc_amt_dec == 1
        assert settings.precision.exh_rate_dec == 6
        assert settings.has_country_currency is True
        assert settings.updated_at is not None

    def test_save_settings_replaces_row(self, temp_db):
        """Test saving twice keeps a single settings row."""
        temp_db.save_settings(entities.CompanySettings())
        temp_db.save_settings(
            entities.CompanySettings(precision=entities.DecimalPrecision(amt_dec=4))
        )

        assert temp_db.get_settings().precision.amt_dec == 4

    def test_find_exchange_rate_effective_on_date(self, temp_db):
        """Test the latest rate on or before the date is returned."""
        temp_db.upsert_exchange_rate(2, date(2024, 1, 1), Decimal("3.75"))
        temp_db.upsert_exchange_rate(2, date(2024, 2, 1), Decimal("3.80"))

        assert temp_db.find_exchange_rate(2, date(2023, 12, 31)) is None
        assert temp_db.find_exchange_rate(2, date(2024, 1, 31)).rate == Decimal("3.75")
        assert temp_db.find_exchange_rate(2, date(2024, 2, 1)).rate == Decimal("3.8")
        assert isinstance(temp_db.find_exchange_rate(2, date(2024, 3, 1)), entities.ExchangeRate)

    def test_local_rates_kept_apart(self, temp_db):
        """Test local and document rates do not mix."""
        temp_db.upsert_exchange_rate(2, date(2024, 1, 1), Decimal("3.75"))

        assert temp_db.find_exchange_rate(2, date(2024, 1, 1), is_local=True) is None

        temp_db.upsert_exchange_rate(2, date(2024, 1, 1), Decimal("1.2"), is_local=True)
        assert temp_db.find_exchange_rate(2, date(2024, 1, 1), is_local=True).rate == Decimal("1.2")
        assert temp_db.find_exchange_rate(2, date(2024, 1, 1)).rate == Decimal("3.75")

    def test_upsert_exchange_rate_replaces(self, temp_db):
        """Test storing a rate for the same date replaces it."""
        first_id = temp_db.upsert_exchange_rate(2, date(2024, 1, 1), Decimal("3.75"))
        second_id = temp_db.upsert_exchange_rate(2, date(2024, 1, 1), Decimal("3.70"))

        assert first_id == second_id
        rates = temp_db.list_exchange_rates()
        assert len(rates) == 1
        assert rates[0].rate == Decimal("3.7")

    def test_list_exchange_rates(self, temp_db):
        """Test listing and filtering rates."""
        temp_db.upsert_exchange_rate(3, date(2024, 1, 1), Decimal("1"))
        temp_db.upsert_exchange_rate(2, date(2024, 2, 1), Decimal("3.8"))
        temp_db.upsert_exchange_rate(2, date(2024, 1, 1), Decimal("3.75"))

        rates = temp_db.list_exchange_rates()
        assert [(r.currency_id, r.valid_from) for r in rates] == [
            (2, date(2024, 1, 1)),
            (2, date(2024, 2, 1)),
            (3, date(2024, 1, 1)),
        ]
        assert all(isinstance(r, entities.ExchangeRate) for r in rates)
        assert len(temp_db.list_exchange_rates(currency_id=3)) == 1

    def test_tax_rates(self, temp_db):
        """Test storing, finding and listing tax percentages."""
        temp_db.upsert_tax_rate(1, date(2024, 1, 1), Decimal("6"))
        temp_db.upsert_tax_rate(1, date(2024, 7, 1), Decimal("8"))
        temp_db.upsert_tax_rate(2, date(2024, 1, 1), Decimal("0"))

        found = temp_db.find_tax_rate(1, date(2024, 6, 30))
        assert isinstance(found, entities.TaxRate)
        assert found.percentage == Decimal("6")
        assert temp_db.find_tax_rate(1, date(2024, 7, 1)).percentage == Decimal("8")
        assert temp_db.find_tax_rate(3, date(2024, 7, 1)) is None
        assert len(temp_db.list_tax_rates()) == 3
        assert len(temp_db.list_tax_rates(tax_id=1)) == 2

    def test_factory_uses_environment_path(self, tmp_path, monkeypatch):
        """Test the factory reads the database path from the environment."""
        db_path = tmp_path / "env.db"
        monkeypatch.setenv("LEDGERCALC_DB_PATH", str(db_path))

        db = create_sqlite_database()
        db.upsert_tax_rate(1, date(2024, 1, 1), Decimal("5"))
        db.disconnect()

        assert db_path.exists()

    def test_factory_creates_parent_directory(self, tmp_path):
        """Test a database path in a missing directory is created."""
        db_path = tmp_path / "nested" / "dir" / "ledger.db"

        db = create_sqlite_database(database_path=str(db_path))
        db.disconnect()

        assert db_path.parent.is_dir()
        assert db_path.exists()
